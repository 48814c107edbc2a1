"""Core location, download and classification logic."""

from gitresource.core.location import LocationDescriptor, parse_location_info, validate_location_info
from gitresource.core.resource import GitResource, fetch_git_resource
from gitresource.core.resource_info import ResourceInfo, ResourceKind, classify

__all__ = [
    "GitResource",
    "LocationDescriptor",
    "ResourceInfo",
    "ResourceKind",
    "classify",
    "fetch_git_resource",
    "parse_location_info",
    "validate_location_info",
]
