"""URL parsing, domain extraction and fragment stripping."""

from __future__ import annotations

from urllib.parse import SplitResult, urlsplit, urlunsplit

from doccrawl.errors import MalformedURL, NoDomain


def parse_url(url: str) -> SplitResult:
    """Split *url* into its components.

    Raises:
        MalformedURL: If *url* is not an absolute URL (no scheme) or the
            parser rejects it (bad port, unbalanced IPv6 brackets, ...).
    """
    try:
        parts = urlsplit(url.strip())
        # Accessing .port validates it; urlsplit defers that check.
        parts.port
    except ValueError as exc:
        raise MalformedURL(f"Failed to parse URL {url!r}: {exc}") from exc
    if not parts.scheme:
        raise MalformedURL(f"Failed to parse URL {url!r}: relative URL without a base")
    return parts


def extract_domain(url: str) -> str:
    """Return the host of *url* (lower-cased by the parser).

    Raises:
        MalformedURL: If *url* cannot be parsed.
        NoDomain: If *url* has no host, e.g. ``mailto:`` or ``file:///``.
    """
    host = parse_url(url).hostname
    if not host:
        raise NoDomain(f"URL {url!r} has no domain")
    return host


def same_domain(a: str, b: str) -> bool:
    """``True`` when both URLs have a host and the hosts are identical.

    No subdomain folding: ``docs.example.com`` and ``example.com`` differ.
    """
    try:
        return extract_domain(a) == extract_domain(b)
    except (MalformedURL, NoDomain):
        return False


def strip_fragment(url: str) -> str:
    """Return *url* without its ``#fragment``, other components preserved.

    An empty path on a URL with a host is rendered as ``/`` so that
    ``https://a.com`` and ``https://a.com/#top`` collapse to the same string.
    The host is lower-cased; userinfo and an explicit port are kept.
    """
    parts = parse_url(url)
    path = parts.path
    if parts.netloc and not path:
        path = "/"
    return urlunsplit((parts.scheme, _canonical_netloc(parts), path, parts.query, ""))


def _canonical_netloc(parts: SplitResult) -> str:
    host = parts.hostname
    if not host:
        return parts.netloc
    if ":" in host:
        host = f"[{host}]"
    userinfo, _, _ = parts.netloc.rpartition("@")
    netloc = f"{userinfo}@{host}" if userinfo else host
    if parts.port is not None:
        netloc = f"{netloc}:{parts.port}"
    return netloc
