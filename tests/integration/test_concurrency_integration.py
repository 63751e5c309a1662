# tests/integration/test_concurrency_integration.py

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List

from weighted_inventory import CapacityExceededError, Entry, Inventory
from tests.test_utils import assert_consistent


def test_concurrent_distinct_adds() -> None:
    inventory = Inventory()
    n = 100
    errors: List[BaseException] = []
    start = threading.Barrier(n)

    def worker(i: int) -> None:
        start.wait()
        try:
            inventory.add(Entry(f"Item{i}", 1))
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert inventory.current_weight == n
    assert len({e.name for e in inventory.items}) == n
    assert_consistent(inventory)


def test_concurrent_same_name_adds_merge() -> None:
    inventory = Inventory()
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: inventory.add(Entry("Arrow", 1)), range(80)))
    assert inventory.items == (Entry("Arrow", 80),)
    assert inventory.items[0].weight == 80


def test_concurrent_overflow_never_exceeds_capacity() -> None:
    inventory = Inventory(capacity=50)
    rejected: List[CapacityExceededError] = []
    lock = threading.Lock()

    def worker(i: int) -> None:
        try:
            inventory.add(Entry(f"Item{i % 7}", 3))
        except CapacityExceededError as exc:
            with lock:
                rejected.append(exc)

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(worker, range(40)))

    # 16 adds of 3 fit (48), the remaining 24 are rejected
    assert inventory.current_weight == 48
    assert len(rejected) == 24
    assert_consistent(inventory)


def test_concurrent_add_and_remove() -> None:
    inventory = Inventory()
    inventory.add(Entry("Gold", 50))

    def churn(_: int) -> None:
        inventory.add(Entry("Gold", 1))
        inventory.remove(Entry("Gold", 1))
        assert_consistent(inventory)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(churn, range(200)))

    assert inventory.items == (Entry("Gold", 50),)
    assert inventory.current_weight == 50


def test_snapshot_consistent_while_mutating() -> None:
    inventory = Inventory()
    inventory.add(Entry("Gold", 50))
    stop = threading.Event()
    failures: List[AssertionError] = []

    def reader() -> None:
        while not stop.is_set():
            try:
                assert_consistent(inventory)
            except AssertionError as exc:
                failures.append(exc)

    def churn(i: int) -> None:
        inventory.add(Entry(f"Item{i % 5}", 2))
        inventory.remove(Entry("Gold", 1))
        inventory.add(Entry("Gold", 1))
        inventory.remove_by_name(f"Item{i % 5}")

    readers = [threading.Thread(target=reader) for _ in range(2)]
    for t in readers:
        t.start()
    try:
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(churn, range(200)))
    finally:
        stop.set()
        for t in readers:
            t.join()

    assert failures == []
    assert_consistent(inventory)
