# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from chargebook.domain.records.entities import Record
from chargebook.domain.records.exceptions import RecordNotFoundError
from chargebook.domain.records.repositories import RecordStore


class GetRecordUseCase:
    def __init__(self, *, records: RecordStore) -> None:
        self._records = records

    def execute(self, record_id: str) -> Record:
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError()
        return record
