"""doccrawl CLI — entry-point for crawl runs.

Usage:
    python cli/main.py --help

Commands:
    crawl   → discover every same-domain page of a URL and save each as markdown
    links   → run link discovery only and print the links
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from doccrawl.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from dataclasses import replace
from typing import List, Optional

import typer

from doccrawl.config import Settings, settings
from doccrawl.crawler import crawl
from doccrawl.discovery import discover_links
from doccrawl.errors import CrawlError
from doccrawl.extraction import FirecrawlClient, ScrapeOptions

app = typer.Typer(
    name="doccrawl",
    help="Mirror a documentation site as markdown files via Firecrawl.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Shared option helpers
# ---------------------------------------------------------------------------

def _build_settings(
    api_url: Optional[str],
    api_key: Optional[str],
    output_root: Optional[Path] = None,
    concurrency: Optional[int] = None,
) -> Settings:
    """Overlay command-line values on the environment-derived settings."""
    overrides: dict = {}
    if api_url:
        overrides["firecrawl_api_url"] = api_url
    if api_key:
        overrides["firecrawl_api_key"] = api_key
    if output_root is not None:
        overrides["output_root"] = output_root
    if concurrency is not None:
        overrides["max_concurrent_pages"] = concurrency
    return replace(settings, **overrides)


# ---------------------------------------------------------------------------
# crawl
# ---------------------------------------------------------------------------

@app.command("crawl")
def crawl_cmd(
    url: str = typer.Argument(..., help="Start URL of the documentation site."),
    api_url: Optional[str] = typer.Option(None, help="Firecrawl base URL (overrides FIRECRAWL_API_URL)."),
    api_key: Optional[str] = typer.Option(None, help="Firecrawl API key (overrides FIRECRAWL_API_KEY)."),
    output_root: Optional[Path] = typer.Option(None, help="Directory under which the domain folder is created."),
    concurrency: Optional[int] = typer.Option(None, min=1, help="Pages fetched in parallel (default 1)."),
    only_main_content: Optional[bool] = typer.Option(
        None, "--only-main-content/--full-page", help="Strip navigation, headers and footers."
    ),
    wait_for: Optional[int] = typer.Option(None, help="Milliseconds to wait before extraction."),
    timeout_ms: Optional[int] = typer.Option(None, help="Per-page timeout on the service side (ms)."),
    mobile: bool = typer.Option(False, "--mobile", help="Render with a mobile user agent."),
    block_ads: bool = typer.Option(False, "--block-ads", help="Block advertisements."),
    include_tag: Optional[List[str]] = typer.Option(None, help="HTML tag/selector to include (repeatable)."),
    exclude_tag: Optional[List[str]] = typer.Option(None, help="HTML tag/selector to exclude (repeatable)."),
) -> None:
    """Crawl URL and save every same-domain page as a markdown file."""
    cfg = _build_settings(api_url, api_key, output_root, concurrency)
    options = ScrapeOptions(
        only_main_content=only_main_content,
        wait_for=wait_for,
        timeout=timeout_ms,
        mobile=mobile or None,
        block_ads=block_ads or None,
        include_tags=include_tag or None,
        exclude_tags=exclude_tag or None,
    )

    try:
        cfg.require_api_key()
        with FirecrawlClient(cfg) as client:
            crawl(
                client,
                url,
                output_root=cfg.output_root,
                options=options,
                max_concurrent_pages=cfg.max_concurrent_pages,
            )
    except CrawlError as exc:
        typer.echo(f"❌ Error: {exc}", err=True)
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# links
# ---------------------------------------------------------------------------

@app.command("links")
def links_cmd(
    url: str = typer.Argument(..., help="Page whose same-domain links are listed."),
    api_url: Optional[str] = typer.Option(None, help="Firecrawl base URL (overrides FIRECRAWL_API_URL)."),
    api_key: Optional[str] = typer.Option(None, help="Firecrawl API key (overrides FIRECRAWL_API_KEY)."),
) -> None:
    """List the unique same-domain links found on URL."""
    cfg = _build_settings(api_url, api_key)
    try:
        cfg.require_api_key()
        with FirecrawlClient(cfg) as client:
            links = discover_links(client, url)
    except CrawlError as exc:
        typer.echo(f"❌ Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[links] {len(links)} page(s) on {url}")
    for link in links:
        typer.echo(f"  {link}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
