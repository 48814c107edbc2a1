"""Recursive download of files and directories from GitHub repositories.

A repository path may name a file or a directory, and which one it is only
becomes known after the contents API answers. GitResource fetches the path,
branches on the result, and walks directories depth-first, one entry at a
time. The first failure aborts the walk; files written before it stay on disk.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from gitresource.config.loader import load_config
from gitresource.config.schema import GitResourceSettings
from gitresource.core.location import (
    LocationDescriptor,
    parse_location_info,
    validate_location_info,
)
from gitresource.core.resource_info import ResourceInfo, classify
from gitresource.exceptions import GitResourceError, UnexpectedContentShapeError
from gitresource.fetch.auth import EnvTokenProvider
from gitresource.fetch.github import GitHubContentFetcher
from gitresource.fetch.models import DirectoryListing, FileContent
from gitresource.fetch.protocols import ContentFetcher, FileSaver, TokenProvider
from gitresource.utils.files import LocalFileSystem
from gitresource.utils.paths import parent_repository_path


class GitResource:
    """A resource stored in a GitHub repository."""

    def __init__(
        self,
        info: LocationDescriptor,
        fetcher: ContentFetcher,
        file_system: Optional[FileSaver] = None,
        settings: Optional[GitResourceSettings] = None,
    ):
        """Initialize a git resource.

        Args:
            info: Parsed location info
            fetcher: Content fetcher used for every repository request
            file_system: Persistence for downloaded files (local disk by default)
            settings: Settings providing the default download root
        """
        self.info = info
        self.fetcher = fetcher
        self.file_system = file_system or LocalFileSystem()
        self.settings = settings or GitResourceSettings()

    @classmethod
    def from_location_info(
        cls,
        location_info: str,
        token_provider: Optional[TokenProvider] = None,
        fetcher: Optional[ContentFetcher] = None,
        file_system: Optional[FileSaver] = None,
        settings: Optional[GitResourceSettings] = None,
    ) -> "GitResource":
        """Create a GitResource from a locationInfo JSON payload.

        When no fetcher is given a GitHubContentFetcher is built; if the
        payload carries tokenInfo, its client comes from the token provider.

        Raises:
            MalformedInputError: If location_info cannot be parsed
            TokenResolutionError: If tokenInfo cannot be resolved
        """
        info = parse_location_info(location_info)
        settings = settings or GitResourceSettings()

        if fetcher is None:
            client = None
            if info.token_info:
                provider = token_provider or EnvTokenProvider(timeout=settings.timeout_seconds)
                client = provider.get_oauth_client(info.token_info)
            fetcher = GitHubContentFetcher(
                client=client,
                owns_client=client is not None,
                base_url=settings.api_url,
                timeout=settings.timeout_seconds,
                user_agent=settings.user_agent,
            )

        return cls(info, fetcher, file_system=file_system, settings=settings)

    def validate(self) -> None:
        """Ensure owner, repository and path are set.

        Raises:
            MissingFieldError: Naming the first missing field
        """
        validate_location_info(self.info)

    def resolve_destination(self, destination_dir: str | Path) -> Path:
        """Return destination_dir, or the configured download root if it is empty."""
        if not str(destination_dir):
            return Path(self.settings.download_root)
        return Path(destination_dir)

    def download(self, entire_dir: bool, destination_dir: str | Path = "") -> None:
        """Download the resource into destination_dir.

        In entire-directory mode the parent directory of the requested path
        is downloaded recursively.

        Args:
            entire_dir: Download the containing directory instead of one file
            destination_dir: Local root for downloads ("" for the download root)

        Raises:
            GitResourceError: On the first fetch, decode or persistence failure
        """
        info = self.info
        if entire_dir:
            info = info.with_path(parent_repository_path(info.path))
        self._download(info, entire_dir, self.resolve_destination(destination_dir))

    def _download(
        self, info: LocationDescriptor, entire_dir: bool, destination_dir: Path
    ) -> None:
        options = self.fetcher.parse_get_options(info.get_options)
        try:
            result = self.fetcher.get_repository_contents(
                info.owner, info.repository, info.path, options
            )
        except GitResourceError as e:
            logger.error("Error occurred when trying to get repository contents - {}", e)
            raise

        if isinstance(result, DirectoryListing) and entire_dir:
            logger.debug("{} is a directory with {} entries", info.path or "/", len(result.entries))
            for entry in result.entries:
                try:
                    self._download(info.with_path(entry.path), entire_dir, destination_dir)
                except GitResourceError:
                    logger.error("Error retrieving {} into {}", entry.path, destination_dir)
                    raise

        elif isinstance(result, FileContent) and self.fetcher.is_file_content_type(result):
            try:
                content = result.get_content()
                self.file_system.save_file_content(destination_dir, content, result.path)
            except GitResourceError as e:
                logger.error("Error obtaining file content from git file - {}, {}", result.path, e)
                raise

        elif isinstance(result, DirectoryListing):
            raise UnexpectedContentShapeError(
                f"Path {info.path} is a directory. Please specify entireDir as true "
                "if it is desired to download the entire directory"
            )

        else:
            raise UnexpectedContentShapeError(
                f"Could not download {info.path} from github repository "
                f"{info.owner}/{info.repository}"
            )

    def populate_resource_info(
        self, destination_dir: str | Path, entire_dir: bool
    ) -> ResourceInfo:
        """Describe the downloaded resource for the caller."""
        return classify(self.info, self.resolve_destination(destination_dir), entire_dir)


def fetch_git_resource(
    location_info: str,
    entire_dir: bool = False,
    destination_dir: str | Path = "",
    token_provider: Optional[TokenProvider] = None,
    settings: Optional[GitResourceSettings] = None,
) -> ResourceInfo:
    """Parse, validate, download and classify a git resource.

    Args:
        location_info: locationInfo JSON payload
        entire_dir: Download the containing directory of the path
        destination_dir: Local root for downloads ("" for the download root)
        token_provider: Resolver for tokenInfo (environment-based by default)
        settings: Settings to use (loaded from config files and env by default)

    Returns:
        ResourceInfo describing what was downloaded

    Raises:
        GitResourceError: If any stage fails
    """
    settings = settings or load_config()
    resource = GitResource.from_location_info(
        location_info, token_provider=token_provider, settings=settings
    )
    fetcher = resource.fetcher
    try:
        resource.validate()
        resource.download(entire_dir, destination_dir)
    finally:
        if isinstance(fetcher, GitHubContentFetcher):
            fetcher.close()

    return resource.populate_resource_info(destination_dir, entire_dir)
