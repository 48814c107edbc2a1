"""Exception hierarchy for git resource resolution."""


class GitResourceError(Exception):
    """Base exception for all git resource errors."""


class MalformedInputError(GitResourceError):
    """The location info payload could not be deserialized."""


class InvalidGetOptionsError(MalformedInputError):
    """The getOptions string is not in a supported format."""


class MissingFieldError(GitResourceError):
    """A required location info field is empty."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field.capitalize()} for Git LocationType must be specified")


class FetchError(GitResourceError):
    """The repository contents could not be retrieved."""


class ContentDecodeError(FetchError):
    """File content returned by the API could not be decoded."""


class UnexpectedContentShapeError(GitResourceError):
    """The fetched content was not the kind of resource that was requested."""


class PersistenceError(GitResourceError):
    """Downloaded content could not be written to disk."""


class TokenResolutionError(GitResourceError):
    """A token reference could not be turned into an authenticated client."""
