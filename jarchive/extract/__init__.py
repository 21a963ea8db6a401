"""Extractors turning archive page elements into game records."""
