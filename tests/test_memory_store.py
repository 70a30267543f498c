"""Tests for MemoryRecordStore."""

import itertools

from pagebuffer_core.models import RecordsAdded, RecordsRemoved, StoreReset
from pagebuffer_core.store import MemoryRecordStore


def make_store() -> MemoryRecordStore:
    counter = itertools.count()
    return MemoryRecordStore(id_factory=lambda: f"r{next(counter)}")


def test_add_records_returns_new_ids_in_order():
    store = make_store()
    ids = store.add_records([{"color": "#000"}, {"color": "#fff"}], tag=3)

    assert ids == ["r0", "r1"]
    assert [record.data["color"] for record in store.records] == ["#000", "#fff"]
    assert all(record.position == 3 for record in store.records)


def test_add_records_copies_payloads():
    store = make_store()
    payload = {"color": "#000"}
    store.add_records([payload])
    payload["color"] = "#123"
    assert store.get("r0").data == {"color": "#000"}


def test_get_records_by_ids_skips_unknown():
    store = make_store()
    store.add_records([{"i": 0}, {"i": 1}, {"i": 2}])
    records = store.get_records_by_ids(["r2", "missing", "r0"])
    assert [record.id for record in records] == ["r2", "r0"]


def test_remove_records_emits_removed_event():
    store = make_store()
    events = []
    store.events.subscribe(RecordsRemoved, events.append)
    store.add_records([{"i": 0}, {"i": 1}])

    removed = store.remove_records(["r0", "unknown"])

    assert [record.id for record in removed] == ["r0"]
    assert len(events) == 1
    assert "r0" not in store
    assert len(store) == 1


def test_remove_nothing_emits_nothing():
    store = make_store()
    events = []
    store.events.subscribe(RecordsRemoved, events.append)
    assert store.remove_records(["r9"]) == []
    assert events == []


def test_add_emits_added_event_with_tag():
    store = make_store()
    events = []
    store.events.subscribe(RecordsAdded, events.append)
    store.add_records([{"i": 0}], tag=7)
    store.add_records([], tag=8)

    assert len(events) == 1
    assert events[0].tag == 7


def test_reset_runs_listeners_before_clearing():
    store = make_store()
    store.add_records([{"i": 0}, {"i": 1}])
    seen = []
    store.add_reset_listener(lambda: seen.append(len(store)))
    resets = []
    store.events.subscribe(StoreReset, resets.append)

    store.reset_all()

    assert seen == [2]
    assert len(resets) == 1
    assert len(store) == 0


def test_remove_reset_listener():
    store = make_store()
    calls = []
    listener = lambda: calls.append(1)  # noqa: E731
    store.add_reset_listener(listener)

    assert store.remove_reset_listener(listener) is True
    assert store.remove_reset_listener(listener) is False
    store.reset_all()
    assert calls == []
