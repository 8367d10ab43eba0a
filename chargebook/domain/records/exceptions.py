# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from chargebook.shared.errors.base import DomainError, InfrastructureError


class RecordNotFoundError(DomainError):
    code = "not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Not found"


class StoreCorruptedError(InfrastructureError):
    def __init__(self, path: str) -> None:
        super().__init__("record_store_corrupted", context=None)
        self.path = path
