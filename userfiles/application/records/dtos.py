"""
Data Transfer Objects for the records application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadRecordCommand:
    """Input DTO for storing a user's file.

    Attributes:
        user_id: Identifier from the ``id`` form field, or None if absent.
        content: Bytes of the ``file`` part, or None if no file was sent.
            An empty bytes object is a valid, empty upload.
    """

    user_id: str | None
    content: bytes | None


@dataclass(frozen=True)
class CheckRecordQuery:
    """Input DTO for checking whether a user's file exists."""

    user_id: str


@dataclass(frozen=True)
class RecordExistenceResult:
    """Output DTO for an existence check."""

    user_id: str
    exists: bool


@dataclass(frozen=True)
class RecordListResult:
    """Output DTO for a listing of stored record filenames."""

    filenames: list[str]
