from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from chargebook.application.use_cases.users.login_user import LoginUserUseCase
from chargebook.application.use_cases.users.register_user import RegisterUserUseCase
from chargebook.domain.users.entities import SessionToken, User
from chargebook.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from chargebook.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from chargebook.shared.errors.base import ValidationError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_email_or_phone(self, email: str, phone: str) -> User | None:
        return next(
            (u for u in self._users.values() if u.email == email or u.phone == phone),
            None,
        )

    def add(self, user: User) -> User:
        new_user = User(
            id=self._seq,
            full_name=user.full_name,
            email=user.email,
            phone=user.phone,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def count(self) -> int:
        return len(self._users)


class FakeTokenIssuer(TokenIssuer):
    def issue(self, user_id: int) -> SessionToken:
        now = datetime.now(UTC)
        return SessionToken(
            user_id=user_id,
            token=f"token-{user_id}",
            issued_at=now,
            expires_at=now + timedelta(hours=1),
        )

    def decode(self, token: str) -> int:
        return int(token.removeprefix("token-"))


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users, tokens=FakeTokenIssuer(), password_hasher=DeterministicHasher()
    )


def test_register_user_success(
    users: InMemoryUserRepository, register: RegisterUserUseCase
) -> None:
    user = register.execute("Alice Doe", "alice@example.com", "5550001", "secret123")

    assert user.id == 1
    assert user.full_name == "Alice Doe"
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_email("alice@example.com") is not None


@pytest.mark.parametrize(
    "fields",
    [
        ("", "alice@example.com", "5550001", "secret123"),
        ("Alice", "", "5550001", "secret123"),
        ("Alice", "alice@example.com", "", "secret123"),
        ("Alice", "alice@example.com", "5550001", ""),
    ],
)
def test_register_user_missing_field_raises(
    users: InMemoryUserRepository, register: RegisterUserUseCase, fields: tuple[str, ...]
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        register.execute(*fields)

    assert excinfo.value.message == "All fields required"
    assert users.count() == 0


def test_register_user_duplicate_email_raises(register: RegisterUserUseCase) -> None:
    register.execute("Alice", "alice@example.com", "5550001", "secret123")

    with pytest.raises(UserAlreadyExistsError):
        register.execute("Alice Two", "alice@example.com", "5550002", "other")


def test_register_user_duplicate_phone_raises(register: RegisterUserUseCase) -> None:
    register.execute("Alice", "alice@example.com", "5550001", "secret123")

    with pytest.raises(UserAlreadyExistsError):
        register.execute("Bob", "bob@example.com", "5550001", "other")


def test_login_user_success(register: RegisterUserUseCase, login: LoginUserUseCase) -> None:
    register.execute("Alice", "alice@example.com", "5550001", "secret123")

    result = login.execute("alice@example.com", "secret123")

    assert result.token.token == "token-1"
    assert result.user.id == 1
    assert result.user.full_name == "Alice"
    assert result.user.email == "alice@example.com"
    assert not hasattr(result.user, "password_hash")


def test_login_wrong_password_and_unknown_email_are_indistinguishable(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("Alice", "alice@example.com", "5550001", "secret123")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice@example.com", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        login.execute("nobody@example.com", "secret123")

    assert wrong_password.value.to_dict() == unknown_email.value.to_dict()


def test_login_empty_credentials_raise_invalid_credentials(login: LoginUserUseCase) -> None:
    with pytest.raises(InvalidCredentialsError):
        login.execute("", "")
