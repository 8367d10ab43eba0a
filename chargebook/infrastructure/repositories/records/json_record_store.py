# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Record store backed by a single JSON array file.

Every write loads the whole array, appends, and rewrites the file. A lock
serialises writers inside this process; separate processes sharing the file
can still lose each other's updates.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from chargebook.domain.exceptions import InvariantViolation
from chargebook.domain.records.entities import Record
from chargebook.domain.records.exceptions import StoreCorruptedError
from chargebook.domain.records.repositories import RecordStore
from chargebook.shared.logging import logger
from chargebook.utils.jsonio import JsonListError, read_json_list, write_json_list


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class JsonFileRecordStore(RecordStore):
    def __init__(self, path: Path, *, clock: Callable[[], int] = _epoch_millis) -> None:
        self._path = Path(path)
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> list[Any]:
        try:
            rows = read_json_list(self._path)
        except JsonListError as exc:
            logger.error(f"records.load: unreadable store path={self._path}: {exc}")
            raise StoreCorruptedError(str(self._path)) from exc
        return rows

    def all(self) -> list[Record]:
        records = []
        for row in self._load():
            if not isinstance(row, dict):
                continue
            try:
                records.append(Record.from_dict(row))
            except InvariantViolation:
                logger.warning(f"records.load: skipping entry without id path={self._path}")
        return records

    def get(self, record_id: str) -> Record | None:
        for record in self.all():
            if record.matches(record_id):
                return record
        return None

    def create(self, payload: Mapping[str, Any]) -> Record:
        # Rows that are not records are kept as-is; the file is rewritten whole.
        with self._lock:
            rows = self._load()
            record = Record(id=self._clock(), fields=dict(payload))
            rows.append(record.to_dict())
            write_json_list(self._path, rows)
        logger.info(f"records.create: ok id={record.id} total={len(rows)}")
        return record


__all__ = ["JsonFileRecordStore"]
