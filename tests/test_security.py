"""
Unit tests for the manager credential gate and configuration helpers
"""

import pytest
from datetime import timedelta

from app.config import parse_duration
from app.core.errors import Unauthorized, ValidationError
from app.core.security import CredentialGate
from app.database import convert_database_url_to_async


@pytest.fixture
def gate():
    return CredentialGate(password="s3cret", secret_key="unit-test-key", lifetime=timedelta(hours=8))


class TestCredentialGate:
    """Password-for-token exchange and bearer verification"""

    def test_issued_token_is_accepted(self, gate):
        token = gate.issue("s3cret")
        payload = gate.verify(f"Bearer {token}")
        assert payload["role"] == "manager"
        assert "exp" in payload

    def test_wrong_password_rejected(self, gate):
        with pytest.raises(Unauthorized):
            gate.issue("wrong")

    def test_missing_password_is_a_validation_error(self, gate):
        with pytest.raises(ValidationError):
            gate.issue("")

    def test_unconfigured_password_never_matches(self):
        gate = CredentialGate(password="", secret_key="k")
        with pytest.raises(ValidationError):
            gate.issue("")
        with pytest.raises(Unauthorized):
            gate.issue("anything")

    def test_expired_token_rejected(self, gate):
        token = gate.create_access_token(expires_delta=timedelta(seconds=-1))
        with pytest.raises(Unauthorized) as exc_info:
            gate.verify(f"Bearer {token}")
        assert exc_info.value.message == "Invalid token"

    def test_token_signed_with_other_key_rejected(self, gate):
        other = CredentialGate(password="s3cret", secret_key="another-key")
        token = other.issue("s3cret")
        with pytest.raises(Unauthorized):
            gate.verify(f"Bearer {token}")

    @pytest.mark.parametrize("header, message", [
        (None, "Missing auth header"),
        ("", "Missing auth header"),
        ("Bearer", "Missing token"),
        ("Bearer not-a-jwt", "Invalid token"),
    ])
    def test_bad_headers(self, gate, header, message):
        with pytest.raises(Unauthorized) as exc_info:
            gate.verify(header)
        assert exc_info.value.message == message


class TestConfigHelpers:
    """Duration and database URL parsing"""

    @pytest.mark.parametrize("value, expected", [
        ("8h", timedelta(hours=8)),
        ("30m", timedelta(minutes=30)),
        ("2d", timedelta(days=2)),
        ("45s", timedelta(seconds=45)),
        ("3600", timedelta(hours=1)),
    ])
    def test_parse_duration(self, value, expected):
        assert parse_duration(value) == expected

    def test_parse_duration_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_duration("eight hours")

    def test_sqlite_url_uses_aiosqlite(self):
        assert convert_database_url_to_async("sqlite:///./drivers.db") == "sqlite+aiosqlite:///./drivers.db"

    def test_postgres_url_uses_asyncpg(self):
        url = convert_database_url_to_async("postgresql://u:p@host/db?sslmode=require&channel_binding=require")
        assert url == "postgresql+asyncpg://u:p@host/db?ssl=require"

    def test_unknown_scheme_rejected(self):
        with pytest.raises(ValueError):
            convert_database_url_to_async("mysql://u:p@host/db")
