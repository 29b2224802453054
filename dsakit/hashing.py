"""A hash table of integer keys that resolves collisions by chaining."""

from __future__ import annotations

__all__ = ["ChainedHashTable"]


class ChainedHashTable:
    """Integer keys stored in a fixed number of buckets, each a chain of keys."""

    def __init__(self, buckets: int) -> None:
        if buckets <= 0:
            raise ValueError(f"bucket count must be positive, got {buckets}")
        self._buckets: list[list[int]] = [[] for _ in range(buckets)]

    def _chain(self, key: int) -> list[int]:
        return self._buckets[key % len(self._buckets)]

    def insert(self, key: int) -> None:
        """Append ``key`` to its bucket's chain; duplicates are kept."""
        self._chain(key).append(key)

    def search(self, key: int) -> bool:
        """Return True if ``key`` is stored."""
        return key in self._chain(key)

    def remove(self, key: int) -> None:
        """Remove every stored copy of ``key``; absent keys are ignored."""
        chain = self._chain(key)
        chain[:] = [item for item in chain if item != key]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key)