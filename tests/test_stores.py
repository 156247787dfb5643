"""Tests for the in-memory key/value store."""

import threading

from mailrelay.services import InMemoryStore


def test_get_set_delete():
    store = InMemoryStore()

    assert store.get("user-1") is None
    store.set("user-1", "refresh-1")
    assert store.get("user-1") == "refresh-1"

    store.set("user-1", "refresh-2")
    assert store.get("user-1") == "refresh-2"
    assert len(store) == 1

    store.delete("user-1")
    assert store.get("user-1") is None
    store.delete("user-1")


def test_values_is_a_snapshot():
    store = InMemoryStore()
    store.set("a", 1)

    snapshot = store.values()
    store.set("b", 2)

    assert snapshot == [1]
    assert sorted(store.values()) == [1, 2]


def test_concurrent_writers_keep_one_entry_per_key():
    store = InMemoryStore()

    def writer(n):
        for i in range(200):
            store.set(f"user-{i % 10}", f"token-{n}-{i}")

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store) == 10
    assert all(store.get(f"user-{i}").startswith("token-") for i in range(10))
