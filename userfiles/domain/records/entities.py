"""
Domain entities for the records bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass

RECORD_SUFFIX = ".json"


def record_filename(user_id: str) -> str:
    """Return the storage filename for a user identifier.

    The identifier is used verbatim: no escaping is applied, so callers
    must avoid path separators and reserved characters.
    """
    return f"{user_id}{RECORD_SUFFIX}"


def is_record_filename(name: str) -> bool:
    """Return True if a directory entry name looks like a stored record."""
    return name.endswith(RECORD_SUFFIX)


@dataclass(frozen=True)
class Record:
    """Opaque content uploaded for a single user.

    Attributes:
        user_id: Non-empty identifier, also the storage key.
        content: Raw uploaded bytes. Never parsed or validated.
    """

    user_id: str
    content: bytes

    @property
    def filename(self) -> str:
        return record_filename(self.user_id)
