"""
Use case: Check whether a user's file exists.

Input: CheckRecordQuery (user_id)
Output: RecordExistenceResult
Side effects: None (read-only query).
Failure cases: None.
"""

from userfiles.application.records.dtos import CheckRecordQuery, RecordExistenceResult
from userfiles.domain.records.ports import RecordStore


class CheckRecordUseCase:
    """Answers existence queries for a single user identifier."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def execute(self, query: CheckRecordQuery) -> RecordExistenceResult:
        """Return the identifier along with whether its record exists."""
        return RecordExistenceResult(
            user_id=query.user_id,
            exists=self._store.exists(query.user_id),
        )
