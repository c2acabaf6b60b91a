"""Fetch one page as markdown and write it, with frontmatter, to disk.

Public API
----------
``build_frontmatter`` — the ``---`` delimited header for a page.
``persist_page``      — fetch + write; raises page-scoped errors.
``process_page``      — ``persist_page`` folded into a :class:`PageOutcome`.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from doccrawl.errors import ExtractionError, FileWriteFailed, PageFetchFailed
from doccrawl.extraction.client import ExtractionClient
from doccrawl.extraction.models import Metadata, ScrapeOptions
from doccrawl.models import PageOutcome, PageStatus
from doccrawl.naming import page_filename

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_frontmatter(metadata: Metadata, scraped_at: datetime) -> str:
    """Return the frontmatter block, blank line included.

    ``title`` and ``url`` are omitted when absent; ``scrapeDate`` is always
    present, in RFC 3339 form.  Double quotes and backslashes inside the
    quoted values are backslash-escaped so the block stays valid YAML.
    """
    lines = ["---"]
    if metadata.title:
        lines.append(f"title: {_quote(metadata.title)}")
    if metadata.source_url:
        lines.append(f"url: {_quote(metadata.source_url)}")
    lines.append(f"scrapeDate: {scraped_at.isoformat()}")
    lines.append("---")
    return "\n".join(lines) + "\n\n"


def persist_page(
    client: ExtractionClient,
    url: str,
    output_dir: Path,
    options: ScrapeOptions | None = None,
    clock: Clock = _utc_now,
) -> PageOutcome:
    """Fetch *url* as markdown and write it under *output_dir*.

    An existing file with the same name is overwritten.  A response without
    markdown writes nothing and yields ``PageStatus.NO_CONTENT``.

    Raises:
        PageFetchFailed: If the extraction request fails.
        FileWriteFailed: If the file cannot be written.
    """
    try:
        response = client.extract(url, ["markdown"], options)
    except ExtractionError as exc:
        raise PageFetchFailed(f"Failed to fetch {url}: {exc}") from exc

    data = response.data
    warning = data.warning or None
    if warning:
        print(f"[page] Warning for {url}: {warning}", file=sys.stderr)

    if data.markdown is None:
        print(f"[page] No markdown content received for {url}", file=sys.stderr)
        return PageOutcome(url=url, status=PageStatus.NO_CONTENT, warning=warning)

    path = output_dir / page_filename(data.metadata.title, url)
    content = build_frontmatter(data.metadata, clock()) + data.markdown
    try:
        path.write_text(content, encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise FileWriteFailed(f"Failed to write file {path}: {exc}") from exc

    print(f"[page] Saved: {path}")
    return PageOutcome(url=url, status=PageStatus.SAVED, path=path, warning=warning)


def process_page(
    client: ExtractionClient,
    url: str,
    output_dir: Path,
    options: ScrapeOptions | None = None,
    clock: Clock = _utc_now,
) -> PageOutcome:
    """Like :func:`persist_page` but page-scoped failures become a FAILED outcome."""
    try:
        return persist_page(client, url, output_dir, options, clock)
    except (PageFetchFailed, FileWriteFailed) as exc:
        print(f"[page] Error processing {url}: {exc}", file=sys.stderr)
        return PageOutcome(url=url, status=PageStatus.FAILED, error=exc)
