"""Helpers for multipart form submissions and workflow results."""

from fastapi import UploadFile, status
from fastapi.responses import JSONResponse

from app.core.errors import ErrorCode
from app.schemas.result import OperationResult
from app.storage.base import MediaFile

_STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR.value: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.MISSING_REQUIRED_MEDIA.value: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MEDIA_UPLOAD_FAILED.value: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.NOT_FOUND.value: status.HTTP_404_NOT_FOUND,
    ErrorCode.UNKNOWN_ERROR.value: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def to_media_file(upload: UploadFile | None) -> MediaFile | None:
    """Read an uploaded file. Empty file inputs count as no file."""
    if upload is None or not upload.filename:
        return None
    data = await upload.read()
    return MediaFile(
        filename=upload.filename,
        content_type=upload.content_type or "application/octet-stream",
        data=data,
    )


async def to_media_files(uploads: list[UploadFile] | None) -> list[MediaFile]:
    """Read several uploaded files, skipping empty inputs."""
    files = [await to_media_file(upload) for upload in uploads or []]
    return [f for f in files if f is not None]


def result_response(
    result: OperationResult,
    success_status: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Render a workflow result with the matching HTTP status."""
    if result.success:
        status_code = success_status
    else:
        status_code = _STATUS_BY_CODE.get(
            result.code or "", status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(exclude_none=True),
    )
