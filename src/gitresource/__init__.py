"""Download scripts and documents stored in GitHub repositories."""

from gitresource.core import (
    GitResource,
    LocationDescriptor,
    ResourceInfo,
    ResourceKind,
    classify,
    fetch_git_resource,
    parse_location_info,
    validate_location_info,
)
from gitresource.exceptions import (
    ContentDecodeError,
    FetchError,
    GitResourceError,
    InvalidGetOptionsError,
    MalformedInputError,
    MissingFieldError,
    PersistenceError,
    TokenResolutionError,
    UnexpectedContentShapeError,
)
from gitresource.utils.logging import disable_logging, enable_logging

__version__ = "0.1.0"

disable_logging()

__all__ = [
    "ContentDecodeError",
    "FetchError",
    "GitResource",
    "GitResourceError",
    "InvalidGetOptionsError",
    "LocationDescriptor",
    "MalformedInputError",
    "MissingFieldError",
    "PersistenceError",
    "ResourceInfo",
    "ResourceKind",
    "TokenResolutionError",
    "UnexpectedContentShapeError",
    "classify",
    "disable_logging",
    "enable_logging",
    "fetch_git_resource",
    "parse_location_info",
    "validate_location_info",
]
