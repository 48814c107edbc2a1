"""Repository content fetching."""

from gitresource.fetch.auth import EnvTokenProvider
from gitresource.fetch.github import GitHubContentFetcher
from gitresource.fetch.models import (
    DirectoryListing,
    EntryRef,
    FetchResult,
    FileContent,
    GetOptions,
)
from gitresource.fetch.protocols import ContentFetcher, FileSaver, TokenProvider

__all__ = [
    "ContentFetcher",
    "DirectoryListing",
    "EntryRef",
    "EnvTokenProvider",
    "FetchResult",
    "FileContent",
    "FileSaver",
    "GetOptions",
    "GitHubContentFetcher",
    "TokenProvider",
]
