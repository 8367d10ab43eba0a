# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError

from chargebook.domain.users.entities import User as DomainUser
from chargebook.domain.users.exceptions import UserAlreadyExistsError
from chargebook.domain.users.repositories import UserRepository
from chargebook.infrastructure.db.models import User
from chargebook.infrastructure.db.session import Database
from chargebook.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        full_name=row.full_name,
        email=row.email,
        phone=row.phone,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    def find_by_email(self, email: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def find_by_email_or_phone(self, email: str, phone: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.scalars(
                select(User).where(or_(User.email == email, User.phone == phone))
            ).first()
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with self._db.session_scope() as session:
                row = User(
                    full_name=user.full_name,
                    email=user.email,
                    phone=user.phone,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning("users.add: unique constraint rejected insert")
            raise UserAlreadyExistsError() from exc

    def count(self) -> int:
        with self._db.session_scope() as session:
            return int(session.scalar(select(func.count()).select_from(User)) or 0)
