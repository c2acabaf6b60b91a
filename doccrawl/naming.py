"""Filesystem-safe names for output directories and page artifacts."""

from __future__ import annotations

# Path separators, wildcards, drive/scheme separator, pipe, quotes, angle
# brackets, extension separator and space.
_INVALID_CHARS = '/\\?%*:|"<>. '
_TRANSLATION = str.maketrans({c: "_" for c in _INVALID_CHARS})

MARKDOWN_SUFFIX = ".md"


def sanitize_filename(name: str) -> str:
    """Replace every character unsafe in a path component with ``_``.

    The ``.`` is replaced too, so append any extension *after* sanitising.

    >>> sanitize_filename("hello/world.txt")
    'hello_world_txt'
    """
    return name.translate(_TRANSLATION)


def page_filename(title: str | None, url: str) -> str:
    """Artifact filename for a page: its title if known, else its URL."""
    if title:
        return sanitize_filename(title) + MARKDOWN_SUFFIX
    return "page_" + sanitize_filename(url) + MARKDOWN_SUFFIX
