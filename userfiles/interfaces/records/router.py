"""
FastAPI router for the records bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
Filesystem work runs in the threadpool so the event loop never blocks.
"""

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from userfiles.application.records.check_record import CheckRecordUseCase
from userfiles.application.records.dtos import CheckRecordQuery, UploadRecordCommand
from userfiles.application.records.list_records import ListRecordsUseCase
from userfiles.application.records.upload_record import UploadRecordUseCase
from userfiles.interfaces.records.dependencies import (
    get_check_record_use_case,
    get_list_records_use_case,
    get_upload_record_use_case,
)
from userfiles.interfaces.records.schemas import (
    ErrorResponse,
    UploadResponse,
    UserExistsResponse,
    UserListResponse,
)

router = APIRouter(tags=["records"])


@router.post(
    "/user/add",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Upload a user's file",
    description=(
        "Multipart form with an `id` field and a `file` part. "
        "Stores the file as `<id>.json`, replacing any previous upload."
    ),
)
async def add_user_file(
    request: Request,
    use_case: UploadRecordUseCase = Depends(get_upload_record_use_case),
) -> UploadResponse:
    """Store the uploaded file for the given user."""
    async with request.form() as form:
        user_id = form.get("id")
        upload = form.get("file")
        content = await upload.read() if isinstance(upload, UploadFile) else None

    command = UploadRecordCommand(
        user_id=user_id if isinstance(user_id, str) else None,
        content=content,
    )
    await run_in_threadpool(use_case.execute, command)
    return UploadResponse()


@router.get(
    "/users",
    response_model=UserListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List stored users",
    description="Filenames of every stored record. Order is not guaranteed.",
)
async def list_users(
    use_case: ListRecordsUseCase = Depends(get_list_records_use_case),
) -> UserListResponse:
    """List the filenames of all stored records."""
    result = await run_in_threadpool(use_case.execute)
    return UserListResponse(users=result.filenames)


@router.get(
    "/user/{user_id}",
    response_model=UserExistsResponse,
    summary="Check whether a user's file exists",
    description="Always answers 200; only the `exists` flag varies.",
)
async def check_user_file(
    user_id: str,
    use_case: CheckRecordUseCase = Depends(get_check_record_use_case),
) -> UserExistsResponse:
    """Report whether a file is stored for the user."""
    result = await run_in_threadpool(use_case.execute, CheckRecordQuery(user_id=user_id))
    return UserExistsResponse(user_id=result.user_id, exists=result.exists)
