# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.records.create_record import CreateRecordUseCase
from .use_cases.records.get_record import GetRecordUseCase
from .use_cases.users.login_user import LoginResult, LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "CreateRecordUseCase",
    "GetRecordUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "RegisterUserUseCase",
]
