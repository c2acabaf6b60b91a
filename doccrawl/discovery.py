"""Link discovery: one ``links`` scrape of the start page, filtered to its domain."""

from __future__ import annotations

from doccrawl.errors import ExtractionError, LinkDiscoveryFailed, MalformedURL, NoDomain
from doccrawl.extraction.client import ExtractionClient
from doccrawl.extraction.models import ScrapeOptions
from doccrawl.urls import extract_domain, strip_fragment


def filter_links(candidates: list[str], domain: str) -> list[str]:
    """Keep same-*domain* candidates, fragments stripped, duplicates dropped.

    Unparseable or host-less candidates are silently skipped.  Order of the
    result follows first occurrence in *candidates*.
    """
    seen: set[str] = set()
    links: list[str] = []
    for candidate in candidates:
        try:
            if extract_domain(candidate) != domain:
                continue
            link = strip_fragment(candidate)
        except (MalformedURL, NoDomain):
            continue
        if link not in seen:
            seen.add(link)
            links.append(link)
    return links


def discover_links(
    client: ExtractionClient,
    start_url: str,
    options: ScrapeOptions | None = None,
) -> list[str]:
    """Return the unique same-domain page URLs linked from *start_url*.

    Raises:
        LinkDiscoveryFailed: If the start URL has no domain or the extraction
            request fails.
    """
    try:
        domain = extract_domain(start_url)
    except (MalformedURL, NoDomain) as exc:
        raise LinkDiscoveryFailed(f"Invalid start URL {start_url!r}: {exc}") from exc

    try:
        response = client.extract(start_url, ["links"], options)
    except ExtractionError as exc:
        raise LinkDiscoveryFailed(f"Failed to list links of {start_url}: {exc}") from exc

    return filter_links(response.data.links or [], domain)
