"""Tests for runtime/atomic.py.

Python 3.13+.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from phrasestore.enums import ClientState
from phrasestore.runtime.atomic import AtomicReference, AtomicState


class TestAtomicState:
    """Test compare-and-swap semantics."""

    def test_initial_value(self) -> None:
        """The default state is STANDBY."""
        assert AtomicState().load() is ClientState.STANDBY

    def test_swap_succeeds_on_match(self) -> None:
        """A matching expectation swaps."""
        state = AtomicState(ClientState.READY)

        assert state.compare_and_swap(ClientState.READY, ClientState.SOURCE_PENDING)
        assert state.load() is ClientState.SOURCE_PENDING

    def test_swap_fails_on_mismatch(self) -> None:
        """A stale expectation leaves the state alone."""
        state = AtomicState(ClientState.LOAD_PENDING)

        assert not state.compare_and_swap(ClientState.STANDBY, ClientState.SOURCE_PENDING)
        assert state.load() is ClientState.LOAD_PENDING

    def test_store(self) -> None:
        """store() sets unconditionally."""
        state = AtomicState()
        state.store(ClientState.READY)

        assert state.load() is ClientState.READY
        assert repr(state) == "AtomicState(READY)"

    def test_single_winner(self) -> None:
        """Of many racing swaps from the same state exactly one wins."""
        state = AtomicState()
        workers = 16
        barrier = threading.Barrier(workers)

        def attempt(_: int) -> bool:
            barrier.wait(10)
            return state.compare_and_swap(ClientState.STANDBY, ClientState.LOAD_PENDING)

        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(attempt, range(workers)))

        assert results.count(True) == 1


class TestAtomicReference:
    """Test the published reference cell."""

    def test_load_store(self) -> None:
        """The latest stored object is returned."""
        first, second = {"a": 1}, {"b": 2}
        cell: AtomicReference[dict[str, int]] = AtomicReference(first)

        assert cell.load() is first
        cell.store(second)
        assert cell.load() is second

    def test_none(self) -> None:
        """None is a valid reference."""
        cell: AtomicReference[object | None] = AtomicReference(None)

        assert cell.load() is None
        assert repr(cell) == "AtomicReference(None)"
