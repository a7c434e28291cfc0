"""
Use case: Store the file uploaded for a user.

Input: UploadRecordCommand (user_id, content)
Output: None
Side effects: Writes ``<user_id>.json`` to the record store.
Failure cases: MissingUserIdError, MissingFileError, RecordWriteError.
"""

import logging

from userfiles.application.records.dtos import UploadRecordCommand
from userfiles.domain.records.entities import Record
from userfiles.domain.records.errors import MissingFileError, MissingUserIdError
from userfiles.domain.records.ports import RecordStore

logger = logging.getLogger(__name__)


class UploadRecordUseCase:
    """Validates an upload and persists it, overwriting older content."""

    def __init__(self, store: RecordStore) -> None:
        """Initialize the use case.

        Args:
            store: Record store the upload is written to.
        """
        self._store = store

    def execute(self, command: UploadRecordCommand) -> Record:
        """Run the upload use case.

        The user identifier is checked before the file, and both checks
        happen before any storage call.

        Args:
            command: The user identifier and uploaded bytes.

        Returns:
            The stored record.

        Raises:
            MissingUserIdError: If the identifier is absent or empty.
            MissingFileError: If no file part was provided.
            RecordWriteError: If the store fails to persist the content.
        """
        if not command.user_id:
            raise MissingUserIdError()
        if command.content is None:
            raise MissingFileError()

        record = Record(user_id=command.user_id, content=command.content)
        self._store.put(record.user_id, record.content)
        logger.info("Stored %s (%d bytes)", record.filename, len(record.content))
        return record
