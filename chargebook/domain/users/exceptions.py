# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from chargebook.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_exists"
    status = HTTPStatus.BAD_REQUEST
    message = "User exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_login"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid login"


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid token"
