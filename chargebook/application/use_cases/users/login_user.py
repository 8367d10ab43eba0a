# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from chargebook.domain.users.entities import PublicUser, SessionToken
from chargebook.domain.users.exceptions import InvalidCredentialsError
from chargebook.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository


@dataclass(slots=True, frozen=True)
class LoginResult:
    token: SessionToken
    user: PublicUser


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> LoginResult:
        # Unknown email and wrong password must be indistinguishable to callers.
        if not email or not password:
            raise InvalidCredentialsError()

        user = self._users.find_by_email(email)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        return LoginResult(token=token, user=PublicUser.from_user(user))
