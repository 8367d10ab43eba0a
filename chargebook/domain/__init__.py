# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation
from .records.entities import Record
from .records.exceptions import RecordNotFoundError, StoreCorruptedError
from .users.entities import PublicUser, SessionToken, User
from .users.exceptions import (InvalidCredentialsError, InvalidTokenError,
                               UserAlreadyExistsError)

__all__ = [
    "InvalidCredentialsError",
    "InvalidTokenError",
    "InvariantViolation",
    "PublicUser",
    "Record",
    "RecordNotFoundError",
    "SessionToken",
    "StoreCorruptedError",
    "User",
    "UserAlreadyExistsError",
]
