from __future__ import annotations

import pytest

from adapters.sqlite_counter_store import SQLiteCounterStore
from core.errors import CounterStoreError
from core.models import Absent, CounterRecord, Found


def _store(tmp_path) -> SQLiteCounterStore:
    store = SQLiteCounterStore(str(tmp_path / "counters.db"))
    store.init_db()
    return store


def test_unknown_nickname_is_absent(tmp_path) -> None:
    assert _store(tmp_path).get("foo") == Absent(nickname="foo")


def test_put_then_get(tmp_path) -> None:
    store = _store(tmp_path)
    store.put(CounterRecord(nickname="foo", count=1))
    store.put(CounterRecord(nickname="foo", count=-4))
    assert store.get("foo") == Found(CounterRecord(nickname="foo", count=-4))


def test_nicknames_are_case_sensitive(tmp_path) -> None:
    store = _store(tmp_path)
    store.put(CounterRecord(nickname="Foo", count=2))
    assert store.get("foo") == Absent(nickname="foo")


def test_list_records_highest_first(tmp_path) -> None:
    store = _store(tmp_path)
    store.put(CounterRecord(nickname="a", count=1))
    store.put(CounterRecord(nickname="b", count=5))
    assert store.list_records() == [CounterRecord("b", 5), CounterRecord("a", 1)]


def test_missing_table_raises_store_error(tmp_path) -> None:
    store = SQLiteCounterStore(str(tmp_path / "uninitialized.db"))
    with pytest.raises(CounterStoreError):
        store.get("foo")
    with pytest.raises(CounterStoreError):
        store.put(CounterRecord(nickname="foo", count=1))


def test_listing_uninitialized_store_raises_store_error(tmp_path) -> None:
    store = SQLiteCounterStore(str(tmp_path / "uninitialized.db"))
    with pytest.raises(CounterStoreError):
        store.list_records()


def test_unopenable_database_raises_store_error(tmp_path) -> None:
    store = SQLiteCounterStore(str(tmp_path))
    with pytest.raises(CounterStoreError):
        store.init_db()
    with pytest.raises(CounterStoreError):
        store.list_records()
