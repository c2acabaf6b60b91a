"""Result records produced by a crawl run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from doccrawl.errors import CrawlError


class PageStatus(str, Enum):
    SAVED = "saved"
    NO_CONTENT = "no_content"
    FAILED = "failed"


@dataclass
class PageOutcome:
    """What happened to one discovered link."""

    url: str
    status: PageStatus
    path: Path | None = None
    warning: str | None = None
    error: CrawlError | None = None

    @property
    def ok(self) -> bool:
        """``True`` unless the page failed; a page with no markdown is still ok."""
        return self.status is not PageStatus.FAILED


@dataclass
class CrawlReport:
    """Every link of a run paired with its outcome, in discovery order."""

    start_url: str
    output_dir: Path
    outcomes: list[PageOutcome] = field(default_factory=list)

    @property
    def links(self) -> list[str]:
        return [o.url for o in self.outcomes]

    def count(self, status: PageStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)
