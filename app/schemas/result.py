"""Result values returned by the content workflows."""

from pydantic import BaseModel

from app.core.errors import (
    UNKNOWN_ERROR_MESSAGE,
    DomainError,
    ErrorCode,
    MediaDeleteError,
    ValidationError,
)


class FieldViolationDTO(BaseModel):
    """Field-level validation message."""

    field: str
    message: str


class MediaWarning(BaseModel):
    """A best-effort media step that failed without aborting the operation."""

    url: str
    message: str


class OperationResult(BaseModel):
    """Outcome of a create/update/delete workflow.

    Either ``success`` with the record id, or ``error`` with a user-facing
    message. ``warnings`` lists media cleanup steps that failed.
    """

    success: bool
    id: str | None = None
    error: str | None = None
    code: str | None = None
    violations: list[FieldViolationDTO] = []
    warnings: list[MediaWarning] = []

    @classmethod
    def ok(
        cls,
        record_id: str,
        delete_errors: list[MediaDeleteError] | None = None,
    ) -> "OperationResult":
        return cls(
            success=True,
            id=record_id,
            warnings=[
                MediaWarning(url=e.url, message=e.message)
                for e in delete_errors or []
            ],
        )

    @classmethod
    def failed(cls, error: Exception) -> "OperationResult":
        """Map an exception to a failed result."""
        if isinstance(error, ValidationError):
            return cls(
                success=False,
                error=error.message,
                code=error.code.value,
                violations=[
                    FieldViolationDTO(field=v.field, message=v.message)
                    for v in error.violations
                ],
            )
        if isinstance(error, DomainError):
            return cls(success=False, error=error.message, code=error.code.value)
        return cls(
            success=False,
            error=UNKNOWN_ERROR_MESSAGE,
            code=ErrorCode.UNKNOWN_ERROR.value,
        )
