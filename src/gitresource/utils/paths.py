"""Path utilities for expanding and joining filesystem paths."""

import posixpath
from pathlib import Path


def expand_path(path: str) -> Path:
    """Expand and normalize a path, resolving ~ and relative paths.

    Args:
        path: Path string that may contain ~ or be relative

    Returns:
        Absolute Path object
    """
    return Path(path).expanduser().resolve()


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The path that was ensured
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def build_path(root: Path, repository_path: str) -> Path:
    """Join a local root with a slash-separated repository path."""
    parts = [part for part in repository_path.split("/") if part and part != "."]
    return Path(root).joinpath(*parts)


def parent_repository_path(repository_path: str) -> str:
    """Return the parent of a repository path ("" for the repository root)."""
    parent = posixpath.dirname(repository_path)
    return "" if parent in ("", ".", "/") else parent
