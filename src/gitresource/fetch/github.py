"""GitHub content fetcher using GitHub Contents API."""

from typing import Any, Optional

import httpx
from loguru import logger

from gitresource.exceptions import (
    FetchError,
    InvalidGetOptionsError,
    UnexpectedContentShapeError,
)
from gitresource.fetch.models import (
    DirectoryListing,
    EntryRef,
    FetchResult,
    FileContent,
    GetOptions,
)

SUPPORTED_OPTION_KEYS = ("branch", "commitID")


class GitHubContentFetcher:
    """Fetcher for listing and retrieving contents of GitHub repositories."""

    BASE_URL = "https://api.github.com"
    USER_AGENT = "gitresource/0.1"
    TIMEOUT = 30.0  # seconds

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        owns_client: bool = False,
    ):
        """Initialize GitHub content fetcher.

        Args:
            client: Optional HTTP client, e.g. one already carrying an
                Authorization header.
            base_url: API root (defaults to the public GitHub API)
            timeout: Request timeout used when the fetcher creates its own client
            user_agent: User-Agent header sent with every request
            owns_client: Close an injected client when the fetcher is closed
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._owns_client = client is None or owns_client
        self._client = (
            client if client is not None else httpx.Client(timeout=timeout or self.TIMEOUT)
        )
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": user_agent or self.USER_AGENT,
        }

    def __enter__(self) -> "GitHubContentFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            self._client.close()

    def parse_get_options(self, options: str) -> Optional[GetOptions]:
        """Parse a getOptions string such as ``branch:main`` or ``commitID:abc123``.

        Args:
            options: Raw getOptions value from the location info

        Returns:
            GetOptions with the requested ref, or None when options is empty

        Raises:
            InvalidGetOptionsError: If the string is not in a supported format
        """
        if not options:
            return None

        parts = options.split(":")
        if len(parts) != 2:
            raise InvalidGetOptionsError(
                f"getOptions is not specified in the right format: {options!r}. "
                "Expected 'branch:<name>' or 'commitID:<sha>'"
            )

        key, value = parts[0].strip(), parts[1].strip()
        if key not in SUPPORTED_OPTION_KEYS:
            raise InvalidGetOptionsError(
                f"Only 'branch' and 'commitID' are supported in getOptions, got {key!r}"
            )
        if not value:
            raise InvalidGetOptionsError(f"getOptions value for {key!r} must not be empty")

        return GetOptions(ref=value)

    def get_repository_contents(
        self, owner: str, repo: str, path: str, options: Optional[GetOptions]
    ) -> FetchResult:
        """Get the contents of a repository path.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path within the repository ("" for the repository root)
            options: Optional ref to read from

        Returns:
            FileContent for a file, DirectoryListing for a directory

        Raises:
            FetchError: If the request fails or returns a non-200 status
            UnexpectedContentShapeError: If the response is neither a file nor a listing
        """
        data = self._get_contents(owner, repo, path, options)

        if isinstance(data, list):
            entries = []
            for item in data:
                if not isinstance(item, dict) or not item.get("path"):
                    raise UnexpectedContentShapeError(
                        f"Directory listing for {owner}/{repo}/{path} has an entry without a path: {item!r}"
                    )
                entries.append(
                    EntryRef(
                        path=item["path"],
                        type=item.get("type", "file"),
                        name=item.get("name"),
                    )
                )
            return DirectoryListing(entries=entries)

        if isinstance(data, dict) and data.get("path") is not None:
            return FileContent(
                path=data["path"],
                type=data.get("type", "file"),
                encoding=data.get("encoding"),
                content=data.get("content"),
            )

        raise UnexpectedContentShapeError(
            f"Unrecognized contents response for {owner}/{repo}/{path}"
        )

    def is_file_content_type(self, result: FetchResult) -> bool:
        """Return True only for regular files (not symlinks or submodules)."""
        return isinstance(result, FileContent) and result.type == "file"

    def _get_contents(
        self, owner: str, repo: str, path: str, options: Optional[GetOptions]
    ) -> Any:
        """Perform the contents API request and return the decoded JSON body."""
        url = f"{self.base_url}/repos/{owner}/{repo}/contents/{path.strip('/')}"
        params = {"ref": options.ref} if options and options.ref else None

        logger.debug("GET {} params={}", url, params)
        try:
            response = self._client.get(
                url, headers=self._headers, params=params, follow_redirects=True
            )
        except httpx.HTTPError as e:
            raise FetchError(f"Network error fetching {owner}/{repo}/{path}: {e}") from e

        if response.status_code == 200:
            try:
                return response.json()
            except ValueError as e:
                raise FetchError(
                    f"Invalid JSON in contents response for {owner}/{repo}/{path}"
                ) from e

        if response.status_code == 404:
            raise FetchError(f"Path not found: {owner}/{repo}/{path}")

        if response.status_code in (401, 403):
            raise FetchError(
                f"Access denied to {owner}/{repo}/{path} "
                f"(HTTP {response.status_code}). The repository may be private."
            )

        raise FetchError(
            f"GitHub API returned HTTP {response.status_code} for {owner}/{repo}/{path}"
        )
