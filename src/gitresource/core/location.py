"""Location info parsing and validation for git resources."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gitresource.exceptions import MalformedInputError, MissingFieldError


class LocationDescriptor(BaseModel):
    """Identifies one resource in a GitHub repository.

    Field names follow the locationInfo wire format (``getOptions``,
    ``tokenInfo``); snake_case names are accepted as well.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    owner: str = ""
    repository: str = ""
    path: str = ""
    get_options: str = Field(default="", alias="getOptions")
    token_info: str = Field(default="", alias="tokenInfo")

    def with_path(self, path: str) -> "LocationDescriptor":
        """Return a copy of this descriptor pointing at another path."""
        return self.model_copy(update={"path": path})


def parse_location_info(location_info: str) -> LocationDescriptor:
    """Deserialize a locationInfo JSON payload.

    Args:
        location_info: JSON text with owner, repository, path, getOptions, tokenInfo

    Returns:
        Parsed LocationDescriptor

    Raises:
        MalformedInputError: If the payload is not valid JSON of the expected shape
    """
    try:
        return LocationDescriptor.model_validate_json(location_info)
    except ValidationError as e:
        raise MalformedInputError(
            "Location Info could not be unmarshalled for location type Git. "
            f"Please check JSON format of locationInfo - {e}"
        ) from e


def validate_location_info(descriptor: LocationDescriptor) -> None:
    """Ensure the required fields are set, checking owner, repository, then path.

    Raises:
        MissingFieldError: Naming the first empty field
    """
    for field in ("owner", "repository", "path"):
        if not getattr(descriptor, field):
            raise MissingFieldError(field)
