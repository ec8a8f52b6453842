"""URL validation and display-form helpers for brand and competitor URLs."""

from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")
_TLD = re.compile(r"^[a-zA-Z]+$")
_LABEL = re.compile(r"^[a-zA-Z0-9-]+$")

# Code points a URL parser refuses inside a host.
_FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r #%/:<>?@[\\]^|")

# Stripped from both ends before parsing, as browsers do.
_C0_OR_SPACE = "".join(chr(i) for i in range(0x21))


def has_scheme(value: str) -> bool:
    """Return True if *value* starts with ``<scheme>://``."""
    return bool(_SCHEME.match(value))


def with_scheme(value: str) -> str:
    """Prefix ``https://`` unless *value* already carries a scheme."""
    return value if has_scheme(value) else f"https://{value}"


def split_url(url: str) -> tuple[str, str]:
    """Split an absolute URL into (hostname, path).

    Surrounding control characters and spaces are ignored. The hostname keeps
    its original case. Raises ValueError when the URL has no usable host or
    a port outside 0-65535.
    """
    parts = urlsplit(url.strip(_C0_OR_SPACE))
    netloc = parts.netloc.rpartition("@")[2]

    if netloc.startswith("["):
        host, bracket, _ = netloc.partition("]")
        if not bracket:
            raise ValueError(f"Invalid IPv6 host in {url!r}")
        host += bracket
    else:
        host = netloc.partition(":")[0]
        if any(ch in _FORBIDDEN_HOST_CHARS for ch in host):
            raise ValueError(f"Invalid character in host of {url!r}")

    try:
        parts.port
    except ValueError as e:
        raise ValueError(f"Invalid port in {url!r}: {e}") from e
    if not host:
        raise ValueError(f"No host in {url!r}")

    return host, parts.path or "/"


def ascii_host(hostname: str) -> str:
    """IDNA-encode an internationalized hostname; ASCII hosts pass through."""
    if hostname.isascii():
        return hostname
    return hostname.encode("idna").decode("ascii")


def validate_url(url: str) -> bool:
    """Return True if *url* looks like a public website address.

    A scheme is optional. Internationalized hosts are checked in their
    punycode form. The host needs at least two labels, an alphabetic
    TLD of two or more characters, and labels made of letters, digits and
    inner hyphens.
    """
    try:
        hostname, _ = split_url(with_scheme(url))
        hostname = ascii_host(hostname)
    except ValueError as e:
        logger.warning("URL validation error for %r: %s", url, e)
        return False

    parts = hostname.split(".")
    if len(parts) < 2:
        return False

    tld = parts[-1]
    if len(tld) < 2 or not _TLD.match(tld):
        return False

    for part in parts:
        if not _LABEL.match(part) or part.startswith("-") or part.endswith("-"):
            return False

    return True


def validate_competitor_url(url: str | None) -> str | None:
    """Clean a competitor URL into its display form (host plus path, no scheme).

    Returns None for empty or unparseable input.
    """
    if not url:
        return None

    clean = url.strip()
    if clean.endswith("/"):
        clean = clean[:-1]
    clean = with_scheme(clean)

    try:
        hostname, path = split_url(clean)
    except ValueError:
        return None

    return hostname + (path if path != "/" else "")


def get_domain_from_url(value: str | None) -> str | None:
    """Derive a lowercase domain from a brand or competitor URL.

    Falls back to the text before the first ``/`` when the URL cannot be
    parsed. Returns None for empty input.
    """
    if not value:
        return None
    try:
        hostname, _ = split_url(with_scheme(value))
        return hostname.lower()
    except ValueError as e:
        logger.debug("Falling back to raw domain split for %r: %s", value, e)
        return value.split("/")[0] or None


def normalize_report_url(value: str | None) -> str:
    """Normalize a URL for matching saved reports to a brand.

    Lowercases the hostname and strips trailing slashes. Unparseable input is
    only trimmed and stripped of trailing slashes.
    """
    if not value:
        return ""

    text = str(value).strip()
    if not has_scheme(text):
        return text.rstrip("/")

    try:
        hostname, _ = split_url(text)
    except ValueError:
        return text.rstrip("/")

    parts = urlsplit(text)
    netloc = parts.netloc
    userinfo, at, _ = netloc.rpartition("@")
    host_and_port = netloc[len(userinfo) + len(at):]
    netloc = userinfo + at + hostname.lower() + host_and_port[len(hostname):]

    normalized = f"{parts.scheme.lower()}://{netloc}{parts.path or '/'}"
    if parts.query:
        normalized += f"?{parts.query}"
    if parts.fragment:
        normalized += f"#{parts.fragment}"
    return normalized.rstrip("/")
