"""Unit tests for the lock-striped RecordStore."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from document_manager.domain.exceptions import InvalidArgumentError
from document_manager.infrastructure.storage.record_store import RecordStore


@pytest.fixture
def store() -> RecordStore[str]:
    return RecordStore(stripes=4)


def test_put_then_get(store: RecordStore[str]):
    store.put("a", "first")
    assert store.get("a") == "first"


def test_put_replaces_existing(store: RecordStore[str]):
    store.put("a", "first")
    store.put("a", "second")
    assert store.get("a") == "second"
    assert len(store) == 1


def test_get_missing_returns_none(store: RecordStore[str]):
    assert store.get("missing") is None
    assert store.get("") is None
    assert "missing" not in store


@pytest.mark.parametrize("key", ["", None, 42])
def test_put_rejects_invalid_keys(store: RecordStore[str], key):
    with pytest.raises(InvalidArgumentError):
        store.put(key, "value")


def test_stripes_must_be_positive():
    with pytest.raises(InvalidArgumentError):
        RecordStore(stripes=0)


def test_values_spans_all_stripes(store: RecordStore[str]):
    for i in range(50):
        store.put(f"key-{i}", f"value-{i}")
    assert sorted(store.values()) == sorted(f"value-{i}" for i in range(50))
    assert len(store) == 50


def test_compute_sees_current_value(store: RecordStore[str]):
    seen: list[str | None] = []

    def remap(current):
        seen.append(current)
        return (current or "") + "x"

    store.compute("k", remap)
    store.compute("k", remap)

    assert seen == [None, "x"]
    assert store.get("k") == "xx"


def test_compute_error_leaves_value_untouched(store: RecordStore[str]):
    store.put("k", "kept")

    def explode(current):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        store.compute("k", explode)
    assert store.get("k") == "kept"


def test_single_stripe_store_still_works():
    store: RecordStore[int] = RecordStore(stripes=1)
    store.put("a", 1)
    store.put("b", 2)
    assert sorted(store.values()) == [1, 2]


def test_concurrent_compute_is_atomic_per_key():
    store: RecordStore[int] = RecordStore(stripes=8)

    def increment(_):
        store.compute("counter", lambda current: (current or 0) + 1)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(increment, range(2000)))

    assert store.get("counter") == 2000


def test_concurrent_writers_on_distinct_keys():
    store: RecordStore[int] = RecordStore(stripes=8)

    def write(i: int):
        store.put(f"key-{i}", i)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(write, range(1000)))

    assert len(store) == 1000
    assert sorted(store.values()) == list(range(1000))
