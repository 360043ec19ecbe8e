from fastapi import Header, Request
from typing import Optional
from app.core.security import CredentialGate


def get_credential_gate(request: Request) -> CredentialGate:
    return request.app.state.credential_gate


async def require_manager(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> dict:
    """
    Dependency for mutating endpoints.
    Rejects the request with 401 unless it carries a valid manager bearer token,
    and attaches the decoded payload to request.state.manager
    """
    gate = get_credential_gate(request)
    payload = gate.verify(authorization)
    request.state.manager = payload
    return payload
