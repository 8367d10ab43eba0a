# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from chargebook.domain.users.entities import User
from chargebook.domain.users.exceptions import UserAlreadyExistsError
from chargebook.domain.users.repositories import PasswordHasher, UserRepository
from chargebook.shared.errors.base import ValidationError

MISSING_FIELDS_MESSAGE = "All fields required"
FIELD_TOO_LONG_MESSAGE = "Field too long"


class RegisterUserUseCase:
    """Creates a user account. Does not log the user in."""

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, full_name: str, email: str, phone: str, password: str) -> User:
        if not (full_name and email and phone and password):
            raise ValidationError(message=MISSING_FIELDS_MESSAGE)

        # The unique constraints on email and phone still guard the insert
        # when two registrations race past this check.
        if self._users.find_by_email_or_phone(email, phone):
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            full_name=full_name,
            email=email,
            phone=phone,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        return self._users.add(user)
