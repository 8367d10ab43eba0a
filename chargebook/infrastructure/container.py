# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from chargebook.application.services.password_hashing import \
    WerkzeugPasswordHasher
from chargebook.application.use_cases.records.create_record import \
    CreateRecordUseCase
from chargebook.application.use_cases.records.get_record import \
    GetRecordUseCase
from chargebook.application.use_cases.users.login_user import LoginUserUseCase
from chargebook.application.use_cases.users.register_user import \
    RegisterUserUseCase
from chargebook.infrastructure.auth.jwt_tokens import JwtTokenService
from chargebook.infrastructure.bootstrap import DatabaseBootstrap
from chargebook.infrastructure.db import Database
from chargebook.infrastructure.repositories.records.json_record_store import \
    JsonFileRecordStore
from chargebook.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from chargebook.interfaces.http.controllers.auth_controller import AuthController
from chargebook.interfaces.http.controllers.misc_controller import MiscController
from chargebook.interfaces.http.controllers.records_controller import \
    RecordsController
from chargebook.shared.config import AppConfig


class Container:
    """Wires the object graph for one application instance."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.auth.jwt_secret,
            ttl_seconds=self.config.auth.token_ttl_seconds,
            algorithm=self.config.auth.jwt_algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def record_store(self) -> JsonFileRecordStore:
        return JsonFileRecordStore(self.config.records_file)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_record_use_case(self) -> GetRecordUseCase:
        return GetRecordUseCase(records=self.record_store)

    @cached_property
    def create_record_use_case(self) -> CreateRecordUseCase:
        return CreateRecordUseCase(records=self.record_store)

    @cached_property
    def bootstrap(self) -> DatabaseBootstrap:
        return DatabaseBootstrap(
            db=self.database,
            users=self.user_repository,
            password_hasher=self.password_hasher,
            auth=self.config.auth,
            settings=self.config.bootstrap,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def records_controller(self) -> RecordsController:
        return RecordsController(
            get_use_case=self.get_record_use_case,
            create_use_case=self.create_record_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
