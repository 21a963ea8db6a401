"""URL sanitization for embedded clue media links."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote, urlsplit, urlunsplit

ALLOWED_SCHEMES = frozenset({"http", "https"})
DEFAULT_PORTS = {"http": 80, "https": 443}

# Characters left as-is in each component, on top of letters, digits and
# "_.-~". Existing escapes ("%") are kept so encoding is idempotent.
USERINFO_SAFE = "!$%&'()*+,"
PATH_SAFE = "!$%&'()*+,/:;=@[\\]^|"
QUERY_SAFE = "!$%&()*+,/:;=?@[\\]^`{|}"
FRAGMENT_SAFE = "!#$%&'()*+,/:;=?@[\\]^{|}"


def _encode_host(hostname: str) -> str:
    if hostname.isascii():
        return hostname
    return hostname.encode("idna").decode("ascii")


@dataclass(frozen=True)
class SanitizedURL:
    """Outcome of sanitizing a link target.

    Exactly one of ``url`` and ``error`` is meaningful: ``url`` is empty
    when ``error`` is set.

    Attributes:
        url: The canonical address.
        error: Why the address was rejected, or None on success.
    """

    url: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def sanitize_url(raw_url: str) -> SanitizedURL:
    """Validate and canonicalize a link target.

    Only absolute ``http`` and ``https`` addresses with a host are accepted.
    The canonical form has a lower-case scheme, a lower-case ASCII host
    (internationalized names in punycode), ``/`` as the path when the path
    is empty, and percent-encoded path, query and fragment.

    Args:
        raw_url: The href of an embedded link.

    Returns:
        SanitizedURL with either the canonical address or an error message.
    """
    candidate = raw_url.strip()
    try:
        parts = urlsplit(candidate)
        # Accessing port validates it
        port = parts.port
    except ValueError as e:
        return SanitizedURL(error=f"invalid URL {candidate!r}: {e}")

    if not parts.scheme:
        return SanitizedURL(error=f"invalid URL {candidate!r}: not absolute")
    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        return SanitizedURL(error=f"invalid protocol {scheme}:")
    if not parts.hostname:
        return SanitizedURL(error=f"invalid URL {candidate!r}: missing host")

    try:
        netloc = _encode_host(parts.hostname)
    except UnicodeError as e:
        return SanitizedURL(
            error=f"invalid URL {candidate!r}: bad host: {e}"
        )
    if ":" in netloc:
        netloc = f"[{netloc}]"
    if parts.username is not None:
        userinfo = quote(parts.username, safe=USERINFO_SAFE)
        if parts.password is not None:
            userinfo += ":" + quote(parts.password, safe=USERINFO_SAFE)
        netloc = f"{userinfo}@{netloc}"
    if port is not None and port != DEFAULT_PORTS[scheme]:
        netloc += f":{port}"

    path = quote(parts.path or "/", safe=PATH_SAFE)
    query = quote(parts.query, safe=QUERY_SAFE)
    fragment = quote(parts.fragment, safe=FRAGMENT_SAFE)
    return SanitizedURL(
        url=urlunsplit((scheme, netloc, path, query, fragment))
    )
