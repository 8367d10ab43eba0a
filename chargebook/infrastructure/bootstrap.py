# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
from datetime import UTC, datetime

from chargebook.domain.users.entities import User
from chargebook.domain.users.repositories import PasswordHasher, UserRepository
from chargebook.infrastructure.db.session import Database
from chargebook.infrastructure.health import check_database
from chargebook.shared.config import AuthConfig, BootstrapConfig
from chargebook.shared.logging import logger


class DatabaseBootstrap:
    """Checks connectivity, ensures the schema and seeds the test user."""

    def __init__(
        self,
        *,
        db: Database,
        users: UserRepository,
        password_hasher: PasswordHasher,
        auth: AuthConfig,
        settings: BootstrapConfig,
    ) -> None:
        self._db = db
        self._users = users
        self._password_hasher = password_hasher
        self._auth = auth
        self._settings = settings

    def run(self) -> bool:
        """Return True on success. Failures are logged, never raised."""
        try:
            logger.info("bootstrap: initializing database")
            result = check_database(self._db.engine)
            logger.info(f"bootstrap: database connected (probe={result})")

            self._db.create_all()
            logger.info("bootstrap: tables verified")

            if self._settings.seed_test_user:
                self._seed_test_user()
            return True
        except Exception as exc:
            # The process keeps serving; data-backed requests fail individually.
            logger.error(f"bootstrap: database init failed: {exc}")
            return False

    def _seed_test_user(self) -> None:
        if self._users.count() > 0:
            return
        self._users.add(
            User(
                id=0,
                full_name=self._auth.seed_full_name,
                email=self._auth.seed_email,
                phone=self._auth.seed_phone,
                password_hash=self._password_hasher.hash(self._auth.seed_password),
                created_at=datetime.now(UTC),
            )
        )
        logger.info("bootstrap: test user created")


def schedule_bootstrap(bootstrap: DatabaseBootstrap, delay_seconds: float) -> threading.Timer:
    timer = threading.Timer(delay_seconds, bootstrap.run)
    timer.daemon = True
    timer.start()
    logger.info(f"bootstrap: scheduled in {delay_seconds:.1f}s")
    return timer


__all__ = [
    "DatabaseBootstrap",
    "schedule_bootstrap",
]
