from fastapi import APIRouter, Depends
from app.schemas.auth import LoginRequest, TokenResponse
from app.middleware.auth import get_credential_gate
from app.core.security import CredentialGate

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: LoginRequest,
    gate: CredentialGate = Depends(get_credential_gate)
):
    """Exchange the manager password for a bearer token"""
    return TokenResponse(token=gate.issue(credentials.password))
