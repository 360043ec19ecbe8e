from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    # Optional so a missing password is reported as "Password required"
    password: Optional[str] = None


class TokenResponse(BaseModel):
    token: str


class SuccessResponse(BaseModel):
    success: bool = True
