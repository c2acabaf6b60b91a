"""Per-domain output directory resolution."""

from __future__ import annotations

from pathlib import Path

from doccrawl.errors import DirectoryCreationFailed
from doccrawl.naming import sanitize_filename
from doccrawl.urls import extract_domain


def domain_directory_name(target: str) -> str:
    """Directory name for *target*: its sanitised host, e.g. ``docs_example_com``.

    Raises:
        MalformedURL / NoDomain: If *target* has no usable host.
    """
    return sanitize_filename(extract_domain(target))


def resolve_output_dir(target: str, root: Path | None = None) -> Path:
    """Create (if needed) and return the output directory for *target*.

    The directory lives under *root*, which defaults to the current working
    directory.  Calling this repeatedly for the same domain is safe.

    Raises:
        MalformedURL / NoDomain: If *target* has no usable host.
        DirectoryCreationFailed: On any filesystem error, including an existing
            non-directory entry at the same path.
    """
    base = Path.cwd() if root is None else Path(root)
    path = base / domain_directory_name(target)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationFailed(
            f"Failed to create output directory {path}: {exc}"
        ) from exc
    return path
