# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    full_name: str
    email: str
    phone: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class PublicUser:
    """Projection of a user that is safe to hand to clients."""

    id: int
    full_name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> PublicUser:
        return cls(id=user.id, full_name=user.full_name, email=user.email)


@dataclass(slots=True, frozen=True)
class SessionToken:

    user_id: int
    token: str
    issued_at: datetime
    expires_at: datetime
