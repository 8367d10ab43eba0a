# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from .entities import Record


class RecordStore(Protocol):
    def get(self, record_id: str) -> Record | None: ...
    def create(self, payload: Mapping[str, Any]) -> Record: ...
