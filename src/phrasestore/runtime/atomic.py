"""Atomic primitives for lock-free reads of published state.

Python has no compare-and-swap instruction, so AtomicState guards its
compare-and-set with a private lock that is held only for the comparison
and the store, never across a registration or load. A loser therefore
learns immediately that another operation is running and never waits
for it to finish.

AtomicReference is a plain attribute: a single attribute store or load
is atomic in CPython (and on free-threaded builds, where object attribute
access is internally synchronized), so readers take no lock at all.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import threading

from phrasestore.enums import ClientState

__all__ = ["AtomicReference", "AtomicState"]


class AtomicState:
    """Client state cell with compare-and-swap.

    Example:
        >>> state = AtomicState(ClientState.STANDBY)
        >>> state.compare_and_swap(ClientState.STANDBY, ClientState.LOAD_PENDING)
        True
        >>> state.compare_and_swap(ClientState.STANDBY, ClientState.SOURCE_PENDING)
        False
        >>> state.load()
        <ClientState.LOAD_PENDING: 2>
    """

    __slots__ = ("_lock", "_value")

    def __init__(self, initial: ClientState = ClientState.STANDBY) -> None:
        self._lock = threading.Lock()
        self._value = initial

    def load(self) -> ClientState:
        """Return the current state without locking."""
        return self._value

    def store(self, value: ClientState) -> None:
        """Unconditionally set the state."""
        with self._lock:
            self._value = value

    def compare_and_swap(self, expected: ClientState, new: ClientState) -> bool:
        """Set the state to ``new`` only if it currently equals ``expected``.

        Returns:
            True if the swap happened
        """
        with self._lock:
            if self._value is not expected:
                return False
            self._value = new
            return True

    def __repr__(self) -> str:
        return f"AtomicState({self._value.name})"


class AtomicReference[T]:
    """Reference cell published by whole-object replacement.

    Readers see either the previous object or the new one, never a mix;
    the referenced object must not be mutated after it is stored.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def load(self) -> T:
        """Return the current reference."""
        return self._value

    def store(self, value: T) -> None:
        """Replace the reference."""
        self._value = value

    def __repr__(self) -> str:
        return f"AtomicReference({self._value!r})"
