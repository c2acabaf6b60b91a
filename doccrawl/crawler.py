"""Crawl orchestration: resolve the output directory, discover links, persist pages.

Directory and discovery failures are fatal and propagate.  Each page yields a
:class:`PageOutcome`; a failing page never stops the others.  With
``max_concurrent_pages > 1`` pages are fetched on a thread pool; outcomes are
still reported in discovery order, and two pages that map to the same file
name overwrite each other in completion order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from doccrawl.discovery import discover_links
from doccrawl.extraction.client import ExtractionClient
from doccrawl.extraction.models import ScrapeOptions
from doccrawl.models import CrawlReport, PageOutcome, PageStatus
from doccrawl.output import resolve_output_dir
from doccrawl.persister import process_page


def crawl(
    client: ExtractionClient,
    start_url: str,
    output_root: Path | None = None,
    options: ScrapeOptions | None = None,
    max_concurrent_pages: int = 1,
) -> CrawlReport:
    """Crawl every same-domain page linked from *start_url*.

    Raises:
        MalformedURL / NoDomain: If *start_url* has no usable host.
        DirectoryCreationFailed: If the output directory cannot be created.
        LinkDiscoveryFailed: If the link listing cannot be obtained.
    """
    output_dir = resolve_output_dir(start_url, output_root)
    print(f"[crawl] Saving files to: {output_dir}")

    links = discover_links(client, start_url, options)
    print(f"[crawl] Found {len(links)} documentation pages")

    if max_concurrent_pages > 1 and len(links) > 1:
        outcomes = _process_parallel(client, links, output_dir, options, max_concurrent_pages)
    else:
        outcomes = [process_page(client, url, output_dir, options) for url in links]

    report = CrawlReport(start_url=start_url, output_dir=output_dir, outcomes=outcomes)
    print(
        f"[crawl] Done: {report.count(PageStatus.SAVED)} saved, "
        f"{report.count(PageStatus.NO_CONTENT)} empty, "
        f"{report.count(PageStatus.FAILED)} failed"
    )
    return report


def _process_parallel(
    client: ExtractionClient,
    links: list[str],
    output_dir: Path,
    options: ScrapeOptions | None,
    workers: int,
) -> list[PageOutcome]:
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(process_page, client, url, output_dir, options) for url in links
        ]
        return [f.result() for f in futures]
