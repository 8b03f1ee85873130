"""
Tests for sequence combinators.

Covers ordering, fail-fast, lazy input, the empty case and
thread-safety of the aggregate bookkeeping.
"""

import asyncio
import concurrent.futures
import random
import time

import pytest

from futurelink import sequence, sequence_cf, sequenceM


class CountingFuture(concurrent.futures.Future):
    """Concurrent future recording how many observers were registered."""

    def __init__(self):
        super().__init__()
        self.registered = 0

    def add_done_callback(self, fn):
        self.registered += 1
        super().add_done_callback(fn)


class TestSequenceAsyncio:
    """sequence() over asyncio futures."""

    @pytest.mark.asyncio
    async def test_empty_resolves_immediately(self):
        aggregate = sequence([])
        assert aggregate.done()
        assert aggregate.result() == []

    @pytest.mark.asyncio
    async def test_reverse_completion_keeps_input_order(self):
        loop = asyncio.get_running_loop()
        futures = [loop.create_future() for _ in range(3)]
        aggregate = sequence(futures)

        futures[2].set_result(3)
        futures[1].set_result(2)
        futures[0].set_result(1)

        assert await aggregate == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_waits_for_all_inputs(self):
        loop = asyncio.get_running_loop()
        futures = [loop.create_future() for _ in range(2)]
        aggregate = sequence(futures)

        futures[0].set_result("a")
        await asyncio.sleep(0)
        assert not aggregate.done()

        futures[1].set_result("b")
        assert await aggregate == ["a", "b"]

    @pytest.mark.asyncio
    async def test_lazy_input(self):
        loop = asyncio.get_running_loop()
        futures = [loop.create_future() for _ in range(4)]
        aggregate = sequence(f for f in futures)

        for i, f in enumerate(reversed(futures)):
            f.set_result(3 - i)

        assert await aggregate == [0, 1, 2, 3]

    @pytest.mark.asyncio
    async def test_second_fails_no_partial_list(self):
        loop = asyncio.get_running_loop()
        first, second = loop.create_future(), loop.create_future()
        aggregate = sequence([first, second])
        boom = ValueError("E1")

        second.set_exception(boom)
        with pytest.raises(ValueError) as exc_info:
            await aggregate
        assert exc_info.value is boom

        # late success must not touch the settled aggregate
        first.set_result(1)
        await asyncio.sleep(0)
        assert aggregate.exception() is boom

    @pytest.mark.asyncio
    async def test_first_observed_failure_wins(self):
        loop = asyncio.get_running_loop()
        f0, f1 = loop.create_future(), loop.create_future()
        aggregate = sequence([f0, f1])
        later_index = RuntimeError("index 1, failed first")
        earlier_index = RuntimeError("index 0, failed second")

        f1.set_exception(later_index)
        f0.set_exception(earlier_index)

        with pytest.raises(RuntimeError) as exc_info:
            await aggregate
        assert exc_info.value is later_index

    @pytest.mark.asyncio
    async def test_already_done_inputs(self):
        loop = asyncio.get_running_loop()
        futures = []
        for value in ("x", "y"):
            f = loop.create_future()
            f.set_result(value)
            futures.append(f)

        assert await sequence(futures) == ["x", "y"]

    @pytest.mark.asyncio
    async def test_aggregate_uses_input_loop(self):
        loop = asyncio.get_running_loop()
        f = loop.create_future()
        aggregate = sequence([f])
        assert aggregate.get_loop() is loop
        f.set_result(None)
        assert await aggregate == [None]

    def test_empty_with_explicit_loop(self):
        loop = asyncio.new_event_loop()
        try:
            aggregate = sequence([], loop=loop)
            assert aggregate.get_loop() is loop
            assert aggregate.result() == []
        finally:
            loop.close()


class TestSequenceConcurrent:
    """sequence_cf() over concurrent.futures futures."""

    def test_empty_resolves_immediately(self):
        aggregate = sequence_cf([])
        assert aggregate.done()
        assert aggregate.result() == []

    def test_reverse_completion_keeps_input_order(self):
        futures = [concurrent.futures.Future() for _ in range(3)]
        aggregate = sequence_cf(futures)

        futures[2].set_result(3)
        futures[1].set_result(2)
        assert not aggregate.done()
        futures[0].set_result(1)

        assert aggregate.result(timeout=0) == [1, 2, 3]

    def test_one_observer_per_input(self):
        futures = [CountingFuture() for _ in range(5)]
        sequence_cf(futures)
        assert [f.registered for f in futures] == [1] * 5

    def test_failure_is_verbatim(self):
        futures = [concurrent.futures.Future() for _ in range(2)]
        aggregate = sequence_cf(futures)
        boom = KeyError("missing")

        futures[1].set_exception(boom)

        assert aggregate.exception(timeout=0) is boom
        futures[0].set_result(1)
        assert aggregate.exception(timeout=0) is boom

    def test_cancelled_input_fails_aggregate(self):
        futures = [concurrent.futures.Future() for _ in range(2)]
        aggregate = sequence_cf(futures)

        assert futures[0].cancel()

        assert isinstance(aggregate.exception(timeout=0), concurrent.futures.CancelledError)

    def test_thread_pool_results_in_order(self):
        def work(i: int) -> int:
            time.sleep(random.uniform(0, 0.01))
            return i * i

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(work, i) for i in range(50)]
            aggregate = sequence_cf(futures)
            assert aggregate.result(timeout=10) == [i * i for i in range(50)]


class TestSequenceGeneric:
    """sequenceM() with a custom `new` hook."""

    def test_new_hook_builds_aggregate(self):
        created = []

        def new():
            f = CountingFuture()
            created.append(f)
            return f

        inputs = [concurrent.futures.Future() for _ in range(2)]
        aggregate = sequenceM(inputs, new=new)

        assert created == [aggregate]
        inputs[0].set_result("a")
        inputs[1].set_result("b")
        assert aggregate.result(timeout=0) == ["a", "b"]
