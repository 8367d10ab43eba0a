import pytest

from chargebook.domain import InvariantViolation, PublicUser, Record, User


def test_record_requires_id() -> None:
    with pytest.raises(InvariantViolation):
        Record(id=None, fields={"a": 1})  # type: ignore[arg-type]


def test_record_from_dict_splits_id_from_fields() -> None:
    record = Record.from_dict({"id": 17, "a": 1, "b": [1, 2]})

    assert record.id == 17
    assert dict(record.fields) == {"a": 1, "b": [1, 2]}
    assert record.to_dict() == {"id": 17, "a": 1, "b": [1, 2]}


def test_record_matches_by_string_form() -> None:
    record = Record(id=1700000000000, fields={})

    assert record.matches("1700000000000")
    assert not record.matches("1700000000001")


def test_public_user_drops_password_hash() -> None:
    from datetime import UTC, datetime

    user = User(
        id=3,
        full_name="Alice",
        email="alice@example.com",
        phone="5550001",
        password_hash="secret-hash",
        created_at=datetime.now(UTC),
    )

    public = PublicUser.from_user(user)

    assert (public.id, public.full_name, public.email) == (3, "Alice", "alice@example.com")
    assert not hasattr(public, "password_hash")
