from __future__ import annotations


class ProfileLookupError(Exception):
    """Base class for every failure of a profile lookup."""


class InvalidReference(ProfileLookupError, ValueError):
    """Input matches no LinkedIn, Twitter/X or Facebook pattern."""


class MissingReference(ProfileLookupError):
    """No provider profile URL was set before dispatch."""


class SchemaValidationError(ProfileLookupError, ValueError):
    """Tool arguments fail their declared constraints."""


class RemoteApiError(ProfileLookupError, RuntimeError):
    """Proxycurl answered with an error, or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
