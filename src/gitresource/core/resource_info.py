"""Classification of downloaded resources."""

import posixpath
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from gitresource.core.location import LocationDescriptor
from gitresource.utils.paths import build_path

JSON_EXTENSION = ".json"
YAML_EXTENSION = ".yaml"
DOCUMENT_EXTENSIONS = (JSON_EXTENSION, YAML_EXTENSION)


class ResourceKind(str, Enum):
    """How the caller should treat a downloaded resource."""

    SCRIPT = "Script"
    DOCUMENT = "Document"


@dataclass(frozen=True)
class ResourceInfo:
    """Summary of a downloaded resource.

    Attributes:
        starter_file: Base name of the requested path
        local_destination_path: Where the requested path lives on disk
        resource_extension: Extension of starter_file, possibly empty
        resource_kind: Script or Document
        is_entire_directory: Whether the containing directory was downloaded
    """

    starter_file: str
    local_destination_path: Path
    resource_extension: str
    resource_kind: ResourceKind
    is_entire_directory: bool = False


def classify(
    descriptor: LocationDescriptor, destination_dir: Path, entire_dir: bool
) -> ResourceInfo:
    """Build the ResourceInfo for a descriptor.

    Entire-directory downloads are always scripts. Otherwise a ``.json`` or
    ``.yaml`` extension (case-sensitive) marks a document and anything else
    is a script.
    """
    starter_file = posixpath.basename(descriptor.path.rstrip("/"))
    extension = posixpath.splitext(starter_file)[1]

    if entire_dir:
        kind = ResourceKind.SCRIPT
    elif extension in DOCUMENT_EXTENSIONS:
        kind = ResourceKind.DOCUMENT
    else:
        kind = ResourceKind.SCRIPT

    return ResourceInfo(
        starter_file=starter_file,
        local_destination_path=build_path(Path(destination_dir), descriptor.path),
        resource_extension=extension,
        resource_kind=kind,
        is_entire_directory=entire_dir,
    )
