# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Engine


def check_database(engine: Engine) -> int:
    with engine.connect() as connection:
        return int(connection.execute(text("SELECT 1 + 1 AS result")).scalar_one())


__all__ = ["check_database"]
