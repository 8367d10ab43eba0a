from __future__ import annotations

import json
import threading
from itertools import count
from pathlib import Path

import pytest

from chargebook.application.use_cases.records.create_record import CreateRecordUseCase
from chargebook.application.use_cases.records.get_record import GetRecordUseCase
from chargebook.domain.records.exceptions import RecordNotFoundError, StoreCorruptedError
from chargebook.infrastructure.repositories.records.json_record_store import JsonFileRecordStore
from chargebook.shared.errors.base import ValidationError


@pytest.fixture()
def store(tmp_path: Path) -> JsonFileRecordStore:
    ticks = count(1_700_000_000_000)
    return JsonFileRecordStore(tmp_path / "records.json", clock=lambda: next(ticks))


def test_missing_file_reads_as_empty(store: JsonFileRecordStore) -> None:
    assert store.all() == []
    assert store.get("1") is None


def test_create_appends_and_rewrites_whole_file(store: JsonFileRecordStore) -> None:
    first = store.create({"a": 1})
    second = store.create({"b": "two"})

    on_disk = json.loads(store.path.read_text(encoding="utf-8"))
    assert on_disk == [
        {"id": first.id, "a": 1},
        {"id": second.id, "b": "two"},
    ]


def test_get_matches_stringified_id(store: JsonFileRecordStore) -> None:
    created = store.create({"a": 1})

    found = store.get(str(created.id))

    assert found is not None
    assert found.to_dict() == {"id": created.id, "a": 1}


def test_assigned_id_wins_over_payload_id(store: JsonFileRecordStore) -> None:
    created = store.create({"id": "mine", "a": 1})

    assert created.id == 1_700_000_000_000
    assert created.to_dict() == {"id": 1_700_000_000_000, "a": 1}


def test_entries_without_id_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "records.json"
    path.write_text(json.dumps([{"note": "orphan"}, {"id": "abc", "x": 1}]), encoding="utf-8")
    store = JsonFileRecordStore(path)

    assert [r.id for r in store.all()] == ["abc"]
    assert store.get("abc") is not None


def test_malformed_file_raises_store_corrupted(tmp_path: Path) -> None:
    path = tmp_path / "records.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoreCorruptedError):
        JsonFileRecordStore(path).get("1")


def test_non_array_document_raises_store_corrupted(tmp_path: Path) -> None:
    path = tmp_path / "records.json"
    path.write_text(json.dumps({"id": 1}), encoding="utf-8")

    with pytest.raises(StoreCorruptedError):
        JsonFileRecordStore(path).create({"a": 1})


def test_concurrent_creates_in_one_process_are_not_lost(store: JsonFileRecordStore) -> None:
    threads = [threading.Thread(target=store.create, args=({"n": i},)) for i in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(r.fields["n"] for r in store.all()) == list(range(20))


def test_get_use_case_raises_not_found(store: JsonFileRecordStore) -> None:
    with pytest.raises(RecordNotFoundError):
        GetRecordUseCase(records=store).execute("doesnotexist")


def test_create_use_case_rejects_non_object_payload(store: JsonFileRecordStore) -> None:
    use_case = CreateRecordUseCase(records=store)

    with pytest.raises(ValidationError):
        use_case.execute([1, 2, 3])
    with pytest.raises(ValidationError):
        use_case.execute(None)


def test_create_keeps_rows_that_are_not_records(tmp_path: Path) -> None:
    path = tmp_path / "records.json"
    path.write_text(json.dumps(["legacy", {"id": 1, "a": 1}, 7]), encoding="utf-8")
    store = JsonFileRecordStore(path, clock=lambda: 1_700_000_000_000)

    store.create({"b": 2})

    assert json.loads(path.read_text(encoding="utf-8")) == [
        "legacy",
        {"id": 1, "a": 1},
        7,
        {"id": 1_700_000_000_000, "b": 2},
    ]
    assert [r.id for r in store.all()] == [1, 1_700_000_000_000]
