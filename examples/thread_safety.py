"""Thread Safety Example - Readers During Reloads.

Translation reads the published registry without locking. A reload builds a
complete new registry and swaps it in, so readers see either the old phrases
or the new ones, never a mix. Registration and loading are exclusive: a
second writer fails immediately with IllegalStateError instead of waiting.

Demonstrates:
1. Concurrent translation from a thread pool
2. Hot reload while readers are running
3. Writers failing fast

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from phrasestore import Client, IllegalStateError

V1 = b"__metadata__: {locale: en_US}\nbanner: Version one\n"
V2 = b"__metadata__: {locale: en_US}\nbanner: Version two\n"


def example_1_concurrent_reads() -> None:
    """Example 1: Many threads translating from one client."""
    print("=" * 60)
    print("Example 1: Concurrent Reads")
    print("=" * 60)

    client = Client()
    client.register(V1)
    client.commit_load()

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: client.translate("en_US", "banner"), range(100)))

    print(f"[OK] {len(results)} translations, distinct results: {sorted(set(results))}")


def example_2_hot_reload() -> None:
    """Example 2: Reload while readers keep translating."""
    print("\n" + "=" * 60)
    print("Example 2: Hot Reload")
    print("=" * 60)

    client = Client()
    client.register(V1)
    client.commit_load()
    stop = threading.Event()

    def reader() -> set[str]:
        seen: set[str] = set()
        while not stop.is_set():
            seen.add(client.translate("en_US", "banner"))
        return seen

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = [executor.submit(reader) for _ in range(4)]
        for round_number in range(10):
            client.register(V2 if round_number % 2 == 0 else V1)
            client.commit_load()
        stop.set()
        seen = set().union(*(future.result() for future in futures))

    print(f"[OK] Readers observed only: {sorted(seen)}")


def example_3_fail_fast_writers() -> None:
    """Example 3: Concurrent registrations never block each other."""
    print("\n" + "=" * 60)
    print("Example 3: Writers Fail Fast")
    print("=" * 60)

    client = Client()
    documents = [f"__metadata__: {{locale: en_US}}\nkey{i}: value {i}\n".encode() for i in range(8)]

    def register(document: bytes) -> str:
        try:
            client.register(document)
        except IllegalStateError:
            return "rejected"
        return "registered"

    with ThreadPoolExecutor(max_workers=8) as executor:
        outcomes = list(executor.map(register, documents))

    print(f"[OK] registered={outcomes.count('registered')} rejected={outcomes.count('rejected')}")
    client.commit_load()
    print(f"[OK] Loaded: {client.get_load_summary()}")


if __name__ == "__main__":
    example_1_concurrent_reads()
    example_2_hot_reload()
    example_3_fail_fast_writers()
