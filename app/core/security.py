from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from app.config import Settings
from app.core.errors import Unauthorized, ValidationError
import secrets
import logging

logger = logging.getLogger(__name__)

MANAGER_ROLE = "manager"


class CredentialGate:
    """Exchanges the shared manager password for a signed, time-limited JWT"""

    def __init__(
        self,
        password: str,
        secret_key: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(hours=8),
    ):
        self.password = password
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialGate":
        return cls(
            password=settings.MANAGER_PASSWORD,
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            lifetime=settings.token_lifetime,
        )

    def check_password(self, password: str) -> bool:
        """Verify a password against the configured secret"""
        if not self.password:
            return False
        return secrets.compare_digest(password.encode("utf-8"), self.password.encode("utf-8"))

    def create_access_token(self, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT asserting the manager role"""
        expire = datetime.now(timezone.utc) + (expires_delta if expires_delta is not None else self.lifetime)
        to_encode = {"role": MANAGER_ROLE, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def issue(self, password: Optional[str]) -> str:
        if not password:
            raise ValidationError("Password required")
        if not self.check_password(password):
            logger.warning("Rejected manager login: invalid password")
            raise Unauthorized("Invalid password")
        return self.create_access_token()

    def decode_token(self, token: str) -> Optional[dict]:
        """Decode and verify a JWT token; None if the signature or expiry is bad"""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None

    def verify(self, authorization: Optional[str]) -> dict:
        """
        Validate an Authorization header value ("Bearer <token>")
        Returns the decoded payload or raises Unauthorized
        """
        if not authorization:
            raise Unauthorized("Missing auth header")

        parts = authorization.split(" ")
        token = parts[1] if len(parts) > 1 else None
        if not token:
            raise Unauthorized("Missing token")

        payload = self.decode_token(token)
        if payload is None:
            raise Unauthorized("Invalid token")
        return payload
