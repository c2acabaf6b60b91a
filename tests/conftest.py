"""Shared fixtures: an in-memory stand-in for the extraction service."""

from __future__ import annotations

import pytest

from doccrawl.errors import ExtractionError
from doccrawl.extraction.client import ExtractionClient
from doccrawl.extraction.models import Metadata, ScrapeData, ScrapeOptions, ScrapeResponse


class FakeExtractionClient(ExtractionClient):
    """Serves canned responses keyed by ``(url, first format)``.

    A value that is an exception instance is raised instead of returned.
    Unknown keys raise :class:`ExtractionError`, like a 404 from the service.
    """

    def __init__(self, responses: dict) -> None:
        self.responses = responses
        self.calls: list[tuple[str, list[str], ScrapeOptions | None]] = []

    def extract(self, url, formats, options=None):
        self.calls.append((url, list(formats), options))
        result = self.responses.get((url, formats[0]))
        if result is None:
            raise ExtractionError(f"API request failed with status 404: no fixture for {url}")
        if isinstance(result, Exception):
            raise result
        return result


def make_response(
    markdown: str | None = None,
    title: str | None = None,
    source_url: str | None = None,
    links: list[str] | None = None,
    warning: str | None = None,
) -> ScrapeResponse:
    return ScrapeResponse(
        success=True,
        data=ScrapeData(
            markdown=markdown,
            links=links,
            warning=warning,
            metadata=Metadata(title=title, source_url=source_url),
        ),
    )


@pytest.fixture
def fake_client():
    """Factory: ``fake_client({(url, "markdown"): response, ...})``."""
    return FakeExtractionClient


@pytest.fixture
def response():
    """Factory building a successful :class:`ScrapeResponse`."""
    return make_response
