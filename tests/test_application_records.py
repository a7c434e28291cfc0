"""
Tests for the records application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
"""

from unittest.mock import MagicMock

import pytest

from userfiles.application.records.check_record import CheckRecordUseCase
from userfiles.application.records.dtos import CheckRecordQuery, UploadRecordCommand
from userfiles.application.records.list_records import ListRecordsUseCase
from userfiles.application.records.upload_record import UploadRecordUseCase
from userfiles.domain.records.errors import (
    MissingFileError,
    MissingUserIdError,
    RecordListingError,
    RecordWriteError,
)
from userfiles.domain.records.ports import RecordStore


@pytest.fixture
def store() -> MagicMock:
    return MagicMock(spec=RecordStore)


class TestUploadRecordUseCase:
    """Tests for the UploadRecordUseCase."""

    def test_valid_upload_is_stored(self, store: MagicMock) -> None:
        """Content is written under the given identifier."""
        record = UploadRecordUseCase(store).execute(
            UploadRecordCommand(user_id="alice", content=b'{"a": 1}')
        )

        store.put.assert_called_once_with("alice", b'{"a": 1}')
        assert record.filename == "alice.json"

    def test_empty_file_is_a_valid_upload(self, store: MagicMock) -> None:
        """A present but empty file part is stored as zero bytes."""
        UploadRecordUseCase(store).execute(UploadRecordCommand(user_id="alice", content=b""))

        store.put.assert_called_once_with("alice", b"")

    @pytest.mark.parametrize("user_id", [None, ""])
    def test_missing_user_id_raises_before_storage(self, store: MagicMock, user_id) -> None:
        """An absent or empty identifier is rejected without touching the store."""
        with pytest.raises(MissingUserIdError):
            UploadRecordUseCase(store).execute(UploadRecordCommand(user_id=user_id, content=b"x"))

        store.put.assert_not_called()

    def test_user_id_is_checked_before_file(self, store: MagicMock) -> None:
        """With neither field present, the identifier error wins."""
        with pytest.raises(MissingUserIdError):
            UploadRecordUseCase(store).execute(UploadRecordCommand(user_id=None, content=None))

    def test_missing_file_raises(self, store: MagicMock) -> None:
        """An upload without a file part is rejected."""
        with pytest.raises(MissingFileError):
            UploadRecordUseCase(store).execute(UploadRecordCommand(user_id="alice", content=None))

        store.put.assert_not_called()

    def test_storage_failure_propagates(self, store: MagicMock) -> None:
        """Write errors from the store are not swallowed or retried."""
        store.put.side_effect = RecordWriteError("alice", "disk full")

        with pytest.raises(RecordWriteError):
            UploadRecordUseCase(store).execute(UploadRecordCommand(user_id="alice", content=b"x"))

        assert store.put.call_count == 1


class TestCheckRecordUseCase:
    """Tests for the CheckRecordUseCase."""

    @pytest.mark.parametrize("exists", [True, False])
    def test_reports_store_answer(self, store: MagicMock, exists: bool) -> None:
        """The result echoes the identifier and the store's answer."""
        store.exists.return_value = exists

        result = CheckRecordUseCase(store).execute(CheckRecordQuery(user_id="bob"))

        store.exists.assert_called_once_with("bob")
        assert result.user_id == "bob"
        assert result.exists is exists


class TestListRecordsUseCase:
    """Tests for the ListRecordsUseCase."""

    def test_returns_store_filenames(self, store: MagicMock) -> None:
        """Filenames are passed through unchanged."""
        store.list_ids.return_value = ["b.json", "a.json"]

        assert ListRecordsUseCase(store).execute().filenames == ["b.json", "a.json"]

    def test_listing_failure_propagates(self, store: MagicMock) -> None:
        """Listing errors reach the caller."""
        store.list_ids.side_effect = RecordListingError("gone")

        with pytest.raises(RecordListingError):
            ListRecordsUseCase(store).execute()
