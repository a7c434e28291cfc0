"""
Use case: List all stored record filenames.

Input: None
Output: RecordListResult
Side effects: None (read-only query).
Failure cases: RecordListingError.
"""

import logging

from userfiles.application.records.dtos import RecordListResult
from userfiles.domain.records.ports import RecordStore

logger = logging.getLogger(__name__)


class ListRecordsUseCase:
    """Enumerates every stored record.

    Filenames are returned as the store yields them, including the
    ``.json`` suffix. No ordering is applied.
    """

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def execute(self) -> RecordListResult:
        """Run the listing use case.

        Raises:
            RecordListingError: If the store cannot be enumerated.
        """
        filenames = self._store.list_ids()
        logger.debug("Listed %d records", len(filenames))
        return RecordListResult(filenames=filenames)
