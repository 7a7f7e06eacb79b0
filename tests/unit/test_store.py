"""Tests for HistoryStore growth, ceiling and snapshots."""

import pytest

from chronicle.config import HistoryLimits
from chronicle.models import FlagSet, HistoryEntry, HistoryTag
from chronicle.store import HistoryStore


def make_entry(n: int = 0) -> HistoryEntry:
    return HistoryEntry(tags=FlagSet([HistoryTag.GENERIC]), turn=n, text=f"event {n}")


class TestHistoryStoreGrowth:
    def test_new_store_is_uninitialised(self, store):
        assert store.count == 0
        assert store.capacity == 0
        assert store.view() == ()

    def test_init_sets_birth_capacity(self, store):
        store.init(10)
        assert store.count == 0
        assert store.capacity == 10

    def test_first_append_initialises_at_birth_size(self, store):
        assert store.append(make_entry())
        assert store.count == 1
        assert store.capacity == 10

    def test_eleventh_append_grows_by_step(self, store):
        for i in range(10):
            assert store.append(make_entry(i))
        assert store.capacity == 10

        assert store.append(make_entry(10))
        assert store.count == 11
        assert store.capacity == 20

    def test_ceiling_rejects_append_without_mutation(self, store):
        for i in range(5000):
            assert store.append(make_entry(i))
        assert store.count == 5000
        assert store.capacity == 5000
        assert store.is_full

        before = store.view()
        assert not store.append(make_entry(9999))
        assert store.count == 5000
        assert store.view() == before

    def test_small_ceiling(self):
        store = HistoryStore(HistoryLimits(birth_size=2, grow_step=3, max_entries=4))
        results = [store.append(make_entry(i)) for i in range(6)]

        assert results == [True, True, True, True, False, False]
        assert store.capacity == 4


class TestEnsureCapacity:
    def test_grows_to_target(self, store):
        store.init(10)
        assert store.ensure_capacity(25)
        assert store.capacity == 25

    def test_no_growth_when_already_sufficient(self, store):
        store.init(10)
        assert not store.ensure_capacity(10)
        assert not store.ensure_capacity(3)
        assert store.capacity == 10

    def test_target_is_capped_at_ceiling(self, store):
        store.init(10)
        assert store.ensure_capacity(100_000)
        assert store.capacity == 5000
        assert not store.ensure_capacity(5001)


class TestClear:
    def test_clear_resets_count_and_capacity(self, store):
        for i in range(15):
            store.append(make_entry(i))

        store.clear()

        assert store.count == 0
        assert store.capacity == 0

    def test_clear_on_empty_store_is_noop(self, store):
        store.clear()
        store.clear()
        assert store.capacity == 0

    def test_append_after_clear_reinitialises(self, store):
        for i in range(25):
            store.append(make_entry(i))
        store.clear()

        assert store.append(make_entry())
        assert store.capacity == 10
        assert store.count == 1


class TestReading:
    def test_view_is_chronological(self, store):
        for i in range(3):
            store.append(make_entry(i))
        assert [e.turn for e in store.view()] == [0, 1, 2]

    def test_view_is_an_owned_snapshot(self, store):
        store.append(make_entry(0))
        snapshot = store.view()

        for i in range(1, 12):
            store.append(make_entry(i))
        snapshot[0].tags.set(HistoryTag.PLAYER_DEATH)

        assert len(snapshot) == 1
        assert not store.get(0).tags.test(HistoryTag.PLAYER_DEATH)

    def test_append_copies_entry(self, store):
        entry = make_entry(0)
        store.append(entry)
        entry.tags.set(HistoryTag.ARTIFACT_LOST)

        assert not store.get(0).tags.test(HistoryTag.ARTIFACT_LOST)

    def test_get_validates_index(self, store):
        store.append(make_entry(0))
        assert store.get(0).text == "event 0"
        with pytest.raises(IndexError):
            store.get(1)
        with pytest.raises(IndexError):
            store.get(-1)

    def test_scan_newest_first(self, store):
        for i in range(4):
            store.append(make_entry(i))
        assert [i for i, _ in store.scan_newest_first()] == [3, 2, 1, 0]


class TestLimitsOverrides:
    def test_text_cut_to_configured_width(self):
        store = HistoryStore(HistoryLimits(text_width=20))
        store.append(HistoryEntry(text="x" * 50))
        assert store.get(0).text == "x" * 20

    def test_default_width_is_field_width(self, store):
        store.append(HistoryEntry(text="y" * 120))
        assert len(store.get(0).text) == 79

    def test_capacity_reserved_before_first_append_is_kept(self, store):
        assert store.ensure_capacity(30)
        assert store.append(make_entry())
        assert store.capacity == 30
        assert store.count == 1
