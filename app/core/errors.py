"""Domain error codes and exceptions for the content workflows."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_MEDIA = "MISSING_REQUIRED_MEDIA"
    MEDIA_UPLOAD_FAILED = "MEDIA_UPLOAD_FAILED"
    MEDIA_DELETE_FAILED = "MEDIA_DELETE_FAILED"
    NOT_FOUND = "NOT_FOUND"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclass(frozen=True)
class FieldViolation:
    """A single field-level validation message."""

    field: str
    message: str


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when submitted fields or files fail validation."""

    code = ErrorCode.VALIDATION_ERROR

    def __init__(self, violations: list[FieldViolation]) -> None:
        super().__init__("Invalid input")
        self.violations = violations


class MissingRequiredMediaError(DomainError):
    """Raised when a required media file (the billboard image) is absent."""

    code = ErrorCode.MISSING_REQUIRED_MEDIA

    def __init__(self, field: str = "image") -> None:
        super().__init__("The main image of the event is required")
        self.field = field


class MediaUploadError(DomainError):
    """Raised when the Media Store rejects or fails an upload."""

    code = ErrorCode.MEDIA_UPLOAD_FAILED

    def __init__(self, filename: str | None = None, reason: str = "") -> None:
        super().__init__("Something went wrong uploading the media files")
        self.filename = filename
        self.reason = reason


class MediaDeleteError(DomainError):
    """Raised when the Media Store fails to delete an asset. Never fatal."""

    code = ErrorCode.MEDIA_DELETE_FAILED

    def __init__(self, url: str, reason: str = "") -> None:
        super().__init__(f"Could not delete media {url}")
        self.url = url
        self.reason = reason


class NotFoundError(DomainError):
    """Raised when an operation targets a record that does not exist."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class AuthenticationError(DomainError):
    """Raised when credentials or a provider token cannot be verified."""

    code = ErrorCode.AUTHENTICATION_FAILED

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


UNKNOWN_ERROR_MESSAGE = "Something went wrong, please try again"
