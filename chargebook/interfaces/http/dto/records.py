from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class RecordCreatedDTO(BaseModel):
    success: bool = True
    record: dict[str, Any]
