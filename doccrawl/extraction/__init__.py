"""Extraction package — remote scraping service boundary."""

from doccrawl.extraction.client import ExtractionClient, FirecrawlClient
from doccrawl.extraction.models import Metadata, ScrapeData, ScrapeOptions, ScrapeResponse

__all__ = [
    "ExtractionClient",
    "FirecrawlClient",
    "Metadata",
    "ScrapeData",
    "ScrapeOptions",
    "ScrapeResponse",
]
