"""Request / response schema of the Firecrawl ``/v1/scrape`` endpoint.

Field names follow Python conventions; the camelCase wire names are declared
as aliases.  Serialise requests with :func:`ScrapeRequest.to_payload`, which
drops every unset option so the service applies its own defaults.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Format = Literal["markdown", "html", "rawHtml", "links", "screenshot", "json"]


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Browser actions (performed by the service before extraction)
# ---------------------------------------------------------------------------

class WaitAction(_WireModel):
    """Wait for a duration *or* for a selector to appear."""

    type: Literal["wait"] = "wait"
    milliseconds: Optional[int] = None
    selector: Optional[str] = None


class ScreenshotAction(_WireModel):
    type: Literal["screenshot"] = "screenshot"
    selector: Optional[str] = None


class ClickAction(_WireModel):
    type: Literal["click"] = "click"
    selector: str


class WriteTextAction(_WireModel):
    type: Literal["write"] = "write"
    selector: str
    text: str


class PressKeyAction(_WireModel):
    """Press a key such as ``Enter``, ``Tab`` or ``ArrowDown``."""

    type: Literal["press"] = "press"
    key: str


class ScrollAction(_WireModel):
    """Scroll by *pixels*; negative values scroll up."""

    type: Literal["scroll"] = "scroll"
    pixels: int


class ScrapeAction(_WireModel):
    type: Literal["scrape"] = "scrape"
    selector: str


class ExecuteJavaScriptAction(_WireModel):
    type: Literal["execute"] = "execute"
    script: str


Action = Annotated[
    Union[
        WaitAction,
        ScreenshotAction,
        ClickAction,
        WriteTextAction,
        PressKeyAction,
        ScrollAction,
        ScrapeAction,
        ExecuteJavaScriptAction,
    ],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------

class Location(_WireModel):
    """Request origin.  ``country`` is ISO 3166-1 alpha-2; the service defaults to US."""

    country: Optional[str] = None
    languages: Optional[list[str]] = None


class JsonOptions(_WireModel):
    """Structured extraction, either schema-driven or prompt-driven."""

    json_schema: Optional[dict[str, Any]] = Field(default=None, alias="schema")
    system_prompt: Optional[str] = Field(default=None, alias="systemPrompt")
    prompt: Optional[str] = None


class ScrapeOptions(_WireModel):
    """Every request parameter except the URL and the formats."""

    only_main_content: Optional[bool] = Field(default=None, alias="onlyMainContent")
    include_tags: Optional[list[str]] = Field(default=None, alias="includeTags")
    exclude_tags: Optional[list[str]] = Field(default=None, alias="excludeTags")
    headers: Optional[dict[str, str]] = None
    wait_for: Optional[int] = Field(default=None, alias="waitFor")
    mobile: Optional[bool] = None
    skip_tls_verification: Optional[bool] = Field(default=None, alias="skipTlsVerification")
    timeout: Optional[int] = None
    json_options: Optional[JsonOptions] = Field(default=None, alias="jsonOptions")
    actions: Optional[list[Action]] = None
    location: Optional[Location] = None
    remove_base64_images: Optional[bool] = Field(default=None, alias="removeBase64Images")
    block_ads: Optional[bool] = Field(default=None, alias="blockAds")


class ScrapeRequest(ScrapeOptions):
    url: str
    formats: list[Format]

    @classmethod
    def build(
        cls,
        url: str,
        formats: list[Format],
        options: ScrapeOptions | None = None,
    ) -> ScrapeRequest:
        base = options.model_dump(exclude_none=True) if options is not None else {}
        return cls(url=url, formats=formats, **base)

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the service, camelCase keys, unset options omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------

class Metadata(_WireModel):
    title: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    source_url: Optional[str] = Field(default=None, alias="sourceURL")
    status_code: Optional[int] = Field(default=None, alias="statusCode")
    error: Optional[str] = None


class ScrapeData(_WireModel):
    markdown: Optional[str] = None
    html: Optional[str] = None
    raw_html: Optional[str] = Field(default=None, alias="rawHtml")
    screenshot: Optional[str] = None
    links: Optional[list[str]] = None
    metadata: Metadata = Field(default_factory=Metadata)
    warning: Optional[str] = None


class ScrapeResponse(_WireModel):
    success: bool
    data: ScrapeData = Field(default_factory=ScrapeData)
    error: Optional[str] = None
