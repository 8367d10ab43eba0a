# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Records kept in the flat file store."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from chargebook.domain.exceptions import InvariantViolation

RecordId = int | str


@dataclass(slots=True, frozen=True)
class Record:
    """A caller supplied payload plus the identifier assigned on creation."""

    id: RecordId
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.id is None or isinstance(self.id, bool):
            raise InvariantViolation("record id is required", field="id")
        if "id" in self.fields:
            object.__setattr__(
                self, "fields", {k: v for k, v in self.fields.items() if k != "id"}
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Record:
        return cls(id=data.get("id"), fields=data)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, **self.fields}

    def matches(self, record_id: str) -> bool:
        return str(self.id) == record_id
