"""Exception hierarchy for the directcloud_uploader library."""

from __future__ import annotations

from pathlib import Path


class DirectCloudError(Exception):
    """Base exception for all directcloud_uploader errors."""

    pass


class ConfigurationError(DirectCloudError):
    """Raised when required settings are missing.

    The missing attribute lists every absent environment variable, not only
    the first one found.
    """

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Required environment variables are not set: {', '.join(missing)}")
        self.missing = list(missing)


class AuthenticationError(DirectCloudError):
    """Raised when the token exchange fails."""

    pass


class FolderCreationError(DirectCloudError):
    """Raised when a remote folder cannot be created."""

    def __init__(self, name: str, reason: str | None) -> None:
        super().__init__(f'Failed to create a new node "{name}": {reason}')
        self.name = name
        self.reason = reason


class UploadError(DirectCloudError):
    """Raised when a file cannot be read or is rejected by the server."""

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        message = f"Failed to upload: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = Path(path)
        self.reason = reason


class ListingError(DirectCloudError):
    """A local path could not be listed for a reason other than being a file."""

    def __init__(self, path: Path | str, cause: OSError) -> None:
        super().__init__(f"{path} could not be uploaded: {cause.strerror or cause}")
        self.path = Path(path)
        self.cause = cause
