"""
Domain-specific errors for the records bounded context.

All errors raised from the domain and infrastructure layers are defined
here and mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class RecordDomainError(Exception):
    """Base error for all records domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(RecordDomainError):
    """Raised when client input is missing or malformed."""


class MissingUserIdError(ValidationError):
    """Raised when an upload carries no user identifier."""

    def __init__(self) -> None:
        super().__init__("User ID is required")


class MissingFileError(ValidationError):
    """Raised when an upload carries no file part."""

    def __init__(self) -> None:
        super().__init__("File is required")


class StorageError(RecordDomainError):
    """Raised when a filesystem operation on the record store fails.

    ``public_message`` is what clients see; ``message`` may carry the
    underlying OS error and is only meant for logs.
    """

    public_message = "Storage failure"


class RecordWriteError(StorageError):
    """Raised when a record cannot be written to disk."""

    public_message = "Failed to save file"

    def __init__(self, user_id: str, reason: str) -> None:
        super().__init__(f"Failed to write record for {user_id!r}: {reason}")
        self.user_id = user_id
        self.reason = reason


class RecordListingError(StorageError):
    """Raised when the record directory cannot be read."""

    public_message = "Failed to read user files"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to list records: {reason}")
        self.reason = reason


class StartupFatalError(RecordDomainError):
    """Raised when the service cannot start.

    Covers an unusable storage root and an unbindable listen address.
    Never mapped to an HTTP response: the process must exit.
    """
