"""Tests for doccrawl.persister — fetch one page, write one markdown file."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from doccrawl.errors import ExtractionError, FileWriteFailed, PageFetchFailed
from doccrawl.extraction.models import Metadata
from doccrawl.models import PageStatus
from doccrawl.persister import build_frontmatter, persist_page, process_page

URL = "https://docs.example.com/api/v1"
_NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def _clock() -> datetime:
    return _NOW


# ---------------------------------------------------------------------------
# build_frontmatter
# ---------------------------------------------------------------------------

class TestBuildFrontmatter:
    def test_full_block(self) -> None:
        meta = Metadata(title="Page Title", source_url="https://example.com")
        assert build_frontmatter(meta, _NOW) == (
            "---\n"
            'title: "Page Title"\n'
            'url: "https://example.com"\n'
            "scrapeDate: 2024-01-01T12:00:00+00:00\n"
            "---\n\n"
        )

    def test_title_and_url_omitted_when_absent(self) -> None:
        block = build_frontmatter(Metadata(), _NOW)
        assert block == "---\nscrapeDate: 2024-01-01T12:00:00+00:00\n---\n\n"

    def test_quotes_in_title_are_escaped(self) -> None:
        block = build_frontmatter(Metadata(title='Say "hi"'), _NOW)
        assert 'title: "Say \\"hi\\""' in block


# ---------------------------------------------------------------------------
# persist_page
# ---------------------------------------------------------------------------

class TestPersistPage:
    def test_titled_page_written_under_title(self, tmp_path, fake_client, response) -> None:
        client = fake_client(
            {(URL, "markdown"): response(markdown="# Hi", title="Getting Started", source_url=URL)}
        )
        outcome = persist_page(client, URL, tmp_path, clock=_clock)

        path = tmp_path / "Getting_Started.md"
        assert outcome.status is PageStatus.SAVED
        assert outcome.path == path
        assert path.read_text(encoding="utf-8") == (
            "---\n"
            'title: "Getting Started"\n'
            f'url: "{URL}"\n'
            "scrapeDate: 2024-01-01T12:00:00+00:00\n"
            "---\n\n"
            "# Hi"
        )

    def test_untitled_page_named_after_url(self, tmp_path, fake_client, response) -> None:
        client = fake_client({(URL, "markdown"): response(markdown="body")})
        outcome = persist_page(client, URL, tmp_path, clock=_clock)

        assert outcome.path == tmp_path / "page_https___docs_example_com_api_v1.md"
        assert outcome.path.read_text(encoding="utf-8").startswith(
            "---\nscrapeDate: 2024-01-01T12:00:00+00:00\n---\n\n"
        )

    def test_no_markdown_writes_nothing_but_succeeds(
        self, tmp_path, fake_client, response, capsys
    ) -> None:
        client = fake_client({(URL, "markdown"): response(title="Empty")})
        outcome = persist_page(client, URL, tmp_path)

        assert outcome.status is PageStatus.NO_CONTENT
        assert outcome.ok
        assert list(tmp_path.iterdir()) == []
        assert f"No markdown content received for {URL}" in capsys.readouterr().err

    def test_empty_markdown_still_written(self, tmp_path, fake_client, response) -> None:
        client = fake_client({(URL, "markdown"): response(markdown="", title="Blank")})
        outcome = persist_page(client, URL, tmp_path, clock=_clock)
        assert outcome.status is PageStatus.SAVED
        assert (tmp_path / "Blank.md").exists()

    def test_engine_warning_is_reported_not_fatal(
        self, tmp_path, fake_client, response, capsys
    ) -> None:
        client = fake_client(
            {(URL, "markdown"): response(markdown="x", title="T", warning="partial render")}
        )
        outcome = persist_page(client, URL, tmp_path)

        assert outcome.status is PageStatus.SAVED
        assert outcome.warning == "partial render"
        assert f"Warning for {URL}: partial render" in capsys.readouterr().err

    def test_existing_file_is_overwritten(self, tmp_path, fake_client, response) -> None:
        (tmp_path / "Intro.md").write_text("old", encoding="utf-8")
        client = fake_client({(URL, "markdown"): response(markdown="new", title="Intro")})
        persist_page(client, URL, tmp_path)
        assert (tmp_path / "Intro.md").read_text(encoding="utf-8").endswith("new")

    def test_fetch_failure_raises_page_fetch_failed(self, tmp_path, fake_client) -> None:
        client = fake_client({(URL, "markdown"): ExtractionError("timeout")})
        with pytest.raises(PageFetchFailed):
            persist_page(client, URL, tmp_path)

    def test_write_failure_raises_file_write_failed(self, tmp_path, fake_client, response) -> None:
        client = fake_client({(URL, "markdown"): response(markdown="x", title="T")})
        with pytest.raises(FileWriteFailed):
            persist_page(client, URL, tmp_path / "missing-dir")

    def test_null_byte_in_title_raises_file_write_failed(
        self, tmp_path, fake_client, response
    ) -> None:
        client = fake_client({(URL, "markdown"): response(markdown="x", title="Bad\x00Title")})
        with pytest.raises(FileWriteFailed):
            persist_page(client, URL, tmp_path)


# ---------------------------------------------------------------------------
# process_page
# ---------------------------------------------------------------------------

class TestProcessPage:
    def test_failure_becomes_outcome(self, tmp_path, fake_client, capsys) -> None:
        client = fake_client({(URL, "markdown"): ExtractionError("connection reset")})
        outcome = process_page(client, URL, tmp_path)

        assert outcome.status is PageStatus.FAILED
        assert not outcome.ok
        assert isinstance(outcome.error, PageFetchFailed)
        assert f"Error processing {URL}" in capsys.readouterr().err

    def test_success_passes_through(self, tmp_path, fake_client, response) -> None:
        client = fake_client({(URL, "markdown"): response(markdown="x", title="T")})
        assert process_page(client, URL, tmp_path).status is PageStatus.SAVED
