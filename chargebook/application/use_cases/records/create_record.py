# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from chargebook.domain.records.entities import Record
from chargebook.domain.records.repositories import RecordStore
from chargebook.shared.errors.base import ValidationError


class CreateRecordUseCase:
    def __init__(self, *, records: RecordStore) -> None:
        self._records = records

    def execute(self, payload: Any) -> Record:
        if not isinstance(payload, Mapping):
            raise ValidationError(message="Record payload must be a JSON object")
        return self._records.create(payload)
