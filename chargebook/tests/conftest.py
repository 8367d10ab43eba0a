from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from chargebook.infrastructure.container import Container
from chargebook.shared.config import (AppConfig, AuthConfig, BootstrapConfig,
                                      DatabaseConfig)

# Keep hashing cheap in tests; production uses scrypt.
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        records_file=tmp_path / "records.json",
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'chargebook.db'}"),
        auth=AuthConfig(jwt_secret="test-secret", password_hash_method=FAST_HASH_METHOD),
        bootstrap=BootstrapConfig(enabled=False, seed_test_user=True),
    )


@pytest.fixture()
def container(app_config: AppConfig) -> Iterator[Container]:
    container = Container(app_config)
    yield container
    container.database.dispose()
