"""Pydantic schemas for API request/response validation."""

from app.schemas.about_us import AboutUsDTO, AboutUsFields
from app.schemas.auth import ChangePassword, FederatedLogin, Token, UserDTO, UserLogin
from app.schemas.billboard import BillboardDTO, BillboardFields
from app.schemas.event import EventDTO, EventFields, EventListResponse
from app.schemas.result import FieldViolationDTO, MediaWarning, OperationResult

__all__ = [
    "AboutUsDTO",
    "AboutUsFields",
    "BillboardDTO",
    "BillboardFields",
    "ChangePassword",
    "EventDTO",
    "EventFields",
    "EventListResponse",
    "FederatedLogin",
    "FieldViolationDTO",
    "MediaWarning",
    "OperationResult",
    "Token",
    "UserDTO",
    "UserLogin",
]
