from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from chargebook.domain.users.exceptions import InvalidTokenError
from chargebook.infrastructure.auth.jwt_tokens import JwtTokenService

SECRET = "unit-test-secret"


def _service_issued_ago(delta: timedelta) -> JwtTokenService:
    issued_at = datetime.now(UTC) - delta
    return JwtTokenService(secret=SECRET, ttl_seconds=3600, clock=lambda: issued_at)


def test_issue_embeds_user_id_and_one_hour_expiry() -> None:
    issued_at = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    service = JwtTokenService(secret=SECRET, clock=lambda: issued_at)

    token = service.issue(42)

    assert token.user_id == 42
    assert token.expires_at - token.issued_at == timedelta(hours=1)
    claims = jwt.decode(
        token.token, SECRET, algorithms=["HS256"], options={"verify_exp": False}
    )
    assert claims["id"] == 42
    assert claims["exp"] - claims["iat"] == 3600


def test_token_still_valid_at_59_minutes() -> None:
    service = _service_issued_ago(timedelta(minutes=59))
    token = service.issue(5)

    assert service.decode(token.token) == 5


def test_token_expired_at_61_minutes() -> None:
    service = _service_issued_ago(timedelta(minutes=61))
    token = service.issue(5)

    with pytest.raises(InvalidTokenError):
        service.decode(token.token)


def test_token_signed_with_other_secret_is_rejected() -> None:
    other = JwtTokenService(secret="some-other-secret")
    token = other.issue(5)

    with pytest.raises(InvalidTokenError):
        JwtTokenService(secret=SECRET).decode(token.token)


def test_garbage_token_is_rejected() -> None:
    with pytest.raises(InvalidTokenError):
        JwtTokenService(secret=SECRET).decode("not-a-token")


def test_token_without_user_id_is_rejected() -> None:
    now = datetime.now(UTC)
    raw = jwt.encode(
        {"iat": now, "exp": now + timedelta(minutes=5)}, SECRET, algorithm="HS256"
    )

    with pytest.raises(InvalidTokenError):
        JwtTokenService(secret=SECRET).decode(raw)
