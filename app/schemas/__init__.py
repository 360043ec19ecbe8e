# Pydantic schemas
from app.schemas.auth import LoginRequest, TokenResponse, SuccessResponse
from app.schemas.driver import DriverForm, DriverResponse
from app.schemas.work import (
    WorkSessionPayload, WorkSessionResponse,
    WorkSessionListItem, WorkSessionFilters
)

__all__ = [
    "LoginRequest", "TokenResponse", "SuccessResponse",
    "DriverForm", "DriverResponse",
    "WorkSessionPayload", "WorkSessionResponse",
    "WorkSessionListItem", "WorkSessionFilters",
]
