"""Hit Counter — tests for atomic increments and reset.

Tests cover:
    - Starts at 0, increments by 1 and returns the new value
    - reset() sets the value back to 0
    - Concurrent increments from threads and asyncio tasks lose no updates
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor

from chirpy.core.hit_counter import HitCounter


def test_counter_starts_at_zero():
    assert HitCounter().value() == 0


def test_increment_returns_new_value():
    counter = HitCounter()
    assert counter.increment() == 1
    assert counter.increment() == 2
    assert counter.value() == 2


def test_reset_sets_value_to_zero():
    counter = HitCounter()
    for _ in range(5):
        counter.increment()
    counter.reset()
    assert counter.value() == 0


def test_counters_are_independent():
    a, b = HitCounter(), HitCounter()
    a.increment()
    assert b.value() == 0


def test_concurrent_thread_increments_lose_no_updates():
    counter = HitCounter()
    n = 10_000
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda _: counter.increment(), range(n)))
    assert counter.value() == n


async def test_concurrent_task_increments_lose_no_updates():
    counter = HitCounter()
    n = 500

    async def hit():
        await asyncio.sleep(0)
        counter.increment()

    await asyncio.gather(*(hit() for _ in range(n)))
    assert counter.value() == n
