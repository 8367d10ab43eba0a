# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from chargebook.application.use_cases.users.login_user import LoginUserUseCase
from chargebook.application.use_cases.users.register_user import (
    FIELD_TOO_LONG_MESSAGE, MISSING_FIELDS_MESSAGE, RegisterUserUseCase)
from chargebook.interfaces.http.dto.auth import (LoginRequestDTO,
                                                 LoginSuccessDTO,
                                                 PublicUserDTO,
                                                 RegisterRequestDTO,
                                                 RegisterSuccessDTO)
from chargebook.shared.errors.validation import raise_validation_error
from chargebook.shared.logging import logger


def _json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            too_long = any(e["type"] == "string_too_long" for e in exc.errors())
            raise_validation_error(
                exc, message=FIELD_TOO_LONG_MESSAGE if too_long else MISSING_FIELDS_MESSAGE
            )

        user = self._register_use_case.execute(
            dto.full_name, dto.email, dto.phone, dto.password
        )

        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(RegisterSuccessDTO().model_dump()), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._login_use_case.execute(dto.email, dto.password)

        payload = LoginSuccessDTO(
            token=result.token.token,
            user=PublicUserDTO.from_domain(result.user),
        ).model_dump(by_alias=True)
        logger.info(f"auth.login: ok user_id={result.user.id}")
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
