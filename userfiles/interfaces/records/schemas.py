"""
Pydantic schemas for the records API responses.

These schemas define the JSON contract of every endpoint.
Uploads arrive as multipart forms and are parsed in the router.
"""

from pydantic import BaseModel, Field

UPLOAD_SUCCESS_MESSAGE = "File uploaded successfully"


class UploadResponse(BaseModel):
    """Response schema for a successful upload."""

    message: str = UPLOAD_SUCCESS_MESSAGE


class UserListResponse(BaseModel):
    """Response schema for the user listing.

    Attributes:
        users: Stored filenames, each ``<user_id>.json``. Unordered.
    """

    users: list[str] = Field(default_factory=list)


class UserExistsResponse(BaseModel):
    """Response schema for the existence check."""

    user_id: str
    exists: bool


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
