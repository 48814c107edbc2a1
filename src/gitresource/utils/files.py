"""Local filesystem persistence for downloaded content."""

from pathlib import Path

from loguru import logger

from gitresource.exceptions import PersistenceError
from gitresource.utils.paths import build_path, ensure_dir


class LocalFileSystem:
    """Writes downloaded files beneath a destination directory."""

    def save_file_content(
        self, destination_dir: Path, content: bytes, relative_path: str
    ) -> Path:
        """Save content at destination_dir/relative_path.

        Intermediate directories are created as needed and existing files
        are overwritten.

        Args:
            destination_dir: Local root for downloads
            content: File bytes to write
            relative_path: Repository-relative path of the file

        Returns:
            Path of the written file

        Raises:
            PersistenceError: If the path escapes destination_dir or the write fails
        """
        root = Path(destination_dir).resolve()
        target = build_path(root, relative_path).resolve()

        if target == root or root not in target.parents:
            raise PersistenceError(
                f"Refusing to write {relative_path!r} outside of {root}"
            )

        try:
            ensure_dir(target.parent)
            target.write_bytes(content)
        except OSError as e:
            raise PersistenceError(f"Error saving file content for {relative_path}: {e}") from e

        logger.debug("Saved {} ({} bytes)", target, len(content))
        return target
