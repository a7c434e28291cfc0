"""
Dependency injection for the records bounded context.

Provides FastAPI dependency functions that wire the record store held
on ``app.state`` into use cases via constructor injection.
"""

from fastapi import Request

from userfiles.application.records.check_record import CheckRecordUseCase
from userfiles.application.records.list_records import ListRecordsUseCase
from userfiles.application.records.upload_record import UploadRecordUseCase
from userfiles.domain.records.ports import RecordStore


def get_record_store(request: Request) -> RecordStore:
    """Return the store built by the application factory."""
    store = getattr(request.app.state, "record_store", None)
    if store is None:
        raise RuntimeError("Record store is not configured on the application")
    return store


def get_upload_record_use_case(request: Request) -> UploadRecordUseCase:
    """Build UploadRecordUseCase with its infrastructure dependencies."""
    return UploadRecordUseCase(store=get_record_store(request))


def get_check_record_use_case(request: Request) -> CheckRecordUseCase:
    """Build CheckRecordUseCase with its infrastructure dependencies."""
    return CheckRecordUseCase(store=get_record_store(request))


def get_list_records_use_case(request: Request) -> ListRecordsUseCase:
    """Build ListRecordsUseCase with its infrastructure dependencies."""
    return ListRecordsUseCase(store=get_record_store(request))
