"""Interfaces for the collaborators used by the downloader."""

from pathlib import Path
from typing import Optional, Protocol

import httpx

from gitresource.fetch.models import FetchResult, GetOptions


class ContentFetcher(Protocol):
    """Lists and retrieves repository contents."""

    def parse_get_options(self, options: str) -> Optional[GetOptions]:
        """Parse an opaque getOptions string.

        Raises:
            InvalidGetOptionsError: If the string is not in a supported format
        """
        ...

    def get_repository_contents(
        self, owner: str, repo: str, path: str, options: Optional[GetOptions]
    ) -> FetchResult:
        """Return either a file or a directory listing for a repository path.

        Raises:
            FetchError: If the contents cannot be retrieved
        """
        ...

    def is_file_content_type(self, result: FetchResult) -> bool:
        """Return True if the result is a regular file that can be saved."""
        ...


class TokenProvider(Protocol):
    """Turns a token reference into an authenticated HTTP client."""

    def get_oauth_client(self, token_info: str) -> httpx.Client:
        """Return an HTTP client authorized with the referenced token.

        Raises:
            TokenResolutionError: If the token cannot be resolved
        """
        ...


class FileSaver(Protocol):
    """Writes downloaded file content to the local filesystem."""

    def save_file_content(
        self, destination_dir: Path, content: bytes, relative_path: str
    ) -> Path:
        """Write content under destination_dir and return the written path.

        Raises:
            PersistenceError: If the file cannot be written
        """
        ...
