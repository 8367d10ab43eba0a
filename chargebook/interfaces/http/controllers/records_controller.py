# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from chargebook.application.use_cases.records.create_record import \
    CreateRecordUseCase
from chargebook.application.use_cases.records.get_record import \
    GetRecordUseCase
from chargebook.interfaces.http.dto.records import RecordCreatedDTO


class RecordsController:
    def __init__(
        self,
        *,
        get_use_case: GetRecordUseCase,
        create_use_case: CreateRecordUseCase,
    ) -> None:
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case

    def get(self, record_id: str) -> tuple[Response, int]:
        record = self._get_use_case.execute(record_id)
        return jsonify(record.to_dict()), 200

    def create(self) -> tuple[Response, int]:
        body = request.get_json(silent=True)
        # No body (or an unparseable one) stores a record holding only its id.
        record = self._create_use_case.execute({} if body is None else body)
        return jsonify(RecordCreatedDTO(record=record.to_dict()).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("records", __name__, url_prefix="/api/records")
        bp.add_url_rule("/<record_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"], strict_slashes=False)
        return bp
