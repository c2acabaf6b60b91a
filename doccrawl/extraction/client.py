"""Clients for the remote content-extraction service.

All clients share one interface: ``extract(url, formats, options) -> ScrapeResponse``.
Any failure (transport, non-success status, unparseable body) surfaces as
:class:`~doccrawl.errors.ExtractionError`; callers never see ``httpx`` errors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import httpx
from pydantic import ValidationError

from doccrawl.config import Settings
from doccrawl.errors import ExtractionError
from doccrawl.extraction.models import Format, ScrapeOptions, ScrapeRequest, ScrapeResponse

_USER_AGENT = "doccrawl/0.1 (+https://github.com/doccrawl)"

# Error bodies can be whole HTML pages; keep messages readable.
_MAX_ERROR_BODY = 500


class ExtractionClient(ABC):
    """Abstract request/response boundary to the extraction engine."""

    @abstractmethod
    def extract(
        self,
        url: str,
        formats: list[Format],
        options: ScrapeOptions | None = None,
    ) -> ScrapeResponse:
        """Fetch *url* rendered in the requested *formats*.

        Raises:
            ExtractionError: On any failure.
        """


class FirecrawlClient(ExtractionClient):
    """Firecrawl ``/v1/scrape`` over ``httpx``.

    Usable as a context manager; the underlying connection pool is closed on
    exit.  Safe to share across threads.
    """

    def __init__(self, settings: Settings, http: httpx.Client | None = None) -> None:
        self._endpoint = settings.scrape_endpoint
        self._http = http or httpx.Client(
            timeout=settings.request_timeout,
            headers={
                "Authorization": f"Bearer {settings.require_api_key()}",
                "User-Agent": _USER_AGENT,
            },
        )

    def __enter__(self) -> FirecrawlClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def extract(
        self,
        url: str,
        formats: list[Format],
        options: ScrapeOptions | None = None,
    ) -> ScrapeResponse:
        request = ScrapeRequest.build(url, formats, options)
        try:
            resp = self._http.post(self._endpoint, json=request.to_payload())
        except httpx.HTTPError as exc:
            raise ExtractionError(f"Request to {self._endpoint} failed: {exc}") from exc

        if not resp.is_success:
            body = resp.text[:_MAX_ERROR_BODY]
            raise ExtractionError(
                f"API request failed with status {resp.status_code}: {body}"
            )

        try:
            parsed = ScrapeResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            raise ExtractionError(f"Unexpected response body for {url}: {exc}") from exc

        if not parsed.success:
            reason = parsed.error or parsed.data.metadata.error or "no reason given"
            raise ExtractionError(f"Extraction of {url} was not successful: {reason}")
        return parsed
