"""Models for repository contents returned by a content fetcher."""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Optional, Union

from gitresource.exceptions import ContentDecodeError


@dataclass(frozen=True)
class GetOptions:
    """Options forwarded to the contents API.

    Attributes:
        ref: Branch name or commit SHA to read from (None means default branch)
    """

    ref: Optional[str] = None


@dataclass(frozen=True)
class EntryRef:
    """A single entry in a directory listing."""

    path: str
    type: str = "file"
    name: Optional[str] = None


@dataclass(frozen=True)
class FileContent:
    """Metadata and encoded content for a single repository file."""

    path: str
    type: str = "file"
    encoding: Optional[str] = "base64"
    content: Optional[str] = None

    def get_content(self) -> bytes:
        """Decode the file content.

        Returns:
            Raw file bytes

        Raises:
            ContentDecodeError: If the encoding is unsupported or the payload is invalid
        """
        if self.encoding == "base64":
            try:
                return base64.b64decode(self.content or "", validate=False)
            except (binascii.Error, ValueError) as e:
                raise ContentDecodeError(
                    f"Could not decode base64 content for {self.path}: {e}"
                ) from e

        if not self.encoding:
            return (self.content or "").encode("utf-8")

        raise ContentDecodeError(
            f"Unsupported content encoding {self.encoding!r} for {self.path}"
        )


@dataclass(frozen=True)
class DirectoryListing:
    """Ordered entries of a repository directory."""

    entries: list[EntryRef] = field(default_factory=list)


FetchResult = Union[FileContent, DirectoryListing]
