"""doccrawl — mirror a documentation site as frontmatter-annotated markdown."""

from doccrawl.crawler import crawl
from doccrawl.discovery import discover_links
from doccrawl.models import CrawlReport, PageOutcome, PageStatus
from doccrawl.persister import persist_page, process_page

__all__ = [
    "crawl",
    "discover_links",
    "persist_page",
    "process_page",
    "CrawlReport",
    "PageOutcome",
    "PageStatus",
]

__version__ = "0.1.0"
