from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .fs import write_json_atomic


class JsonListError(ValueError):
    """The file exists but does not hold a JSON array."""


def read_json_list(path: str | Path) -> list[Any]:
    """Return the array stored at ``path``; a missing file reads as empty."""
    try:
        with open(path, encoding="utf-8") as f:
            loaded = json.load(f)
    except FileNotFoundError:
        return []
    except json.JSONDecodeError as exc:
        raise JsonListError(f"{path}: {exc}") from exc
    if not isinstance(loaded, list):
        raise JsonListError(f"{path}: expected a JSON array, got {type(loaded).__name__}")
    return loaded


def write_json_list(path: str | Path, data: list[Any]) -> None:
    write_json_atomic(path, data)
