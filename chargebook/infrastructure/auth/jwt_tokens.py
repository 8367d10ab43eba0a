# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless session tokens.

Tokens are HS256 JWTs carrying the user id under ``id`` plus ``iat`` and
``exp``. Nothing is persisted: a token is valid while its signature checks
out and ``exp`` has not passed.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from chargebook.domain.users.entities import SessionToken
from chargebook.domain.users.exceptions import InvalidTokenError
from chargebook.domain.users.repositories import TokenIssuer
from chargebook.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenIssuer):
    def __init__(
        self,
        *,
        secret: str,
        ttl_seconds: int = 3600,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self._ttl = timedelta(seconds=ttl_seconds)
        self._algorithm = algorithm
        self._clock = clock

    def issue(self, user_id: int) -> SessionToken:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._ttl
        claims = {"id": user_id, "iat": issued_at, "exp": expires_at}
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        logger.debug(f"auth.token: issued user_id={user_id} exp={expires_at.isoformat()}")
        return SessionToken(
            user_id=user_id, token=token, issued_at=issued_at, expires_at=expires_at
        )

    def decode(self, token: str) -> int:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.info("auth.token: rejected expired token")
            raise InvalidTokenError() from exc
        except jwt.InvalidTokenError as exc:
            logger.info(f"auth.token: rejected token ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        user_id = claims.get("id")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise InvalidTokenError()
        return user_id


__all__ = ["JwtTokenService"]
