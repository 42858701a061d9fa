"""A hash table using separate chaining with linked-list buckets."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Iterator, List, Optional

from dsalgo.hashing import hash_int, hash_string
from dsalgo.linked_list import LinkedList

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_entry_key = attrgetter("key")


class KeyType(enum.Enum):
    """The kind of key a table accepts."""

    STRING = 1
    INT = 2
    CHAR = 3


@dataclass
class _Entry:
    key: Any
    value: Any


class HashTable:
    """Hash table keyed by strings, 32-bit integers or single characters.

    The table doubles its bucket count once the number of stored keys
    reaches the number of buckets. Inserting a key that is already present
    leaves the stored value unchanged.
    """

    def __init__(self, key_type: KeyType, bucket_count: int = 10) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self.key_type = KeyType(key_type)
        self._buckets: List[LinkedList[_Entry]] = [LinkedList() for _ in range(bucket_count)]
        self._count = 0

    def _hash(self, key: Any) -> int:
        if self.key_type is KeyType.STRING:
            if not isinstance(key, str):
                raise TypeError(f"string key expected, got {type(key).__name__}")
            return hash_string(key)
        if self.key_type is KeyType.INT:
            if not isinstance(key, int) or isinstance(key, bool):
                raise TypeError(f"int key expected, got {type(key).__name__}")
            if not _INT_MIN <= key <= _INT_MAX:
                raise OverflowError(f"int key {key} does not fit in 32 bits")
            return hash_int(key)
        if not isinstance(key, str) or len(key) != 1:
            raise TypeError("single-character key expected")
        return hash_int(ord(key))

    def _bucket(self, key: Any) -> LinkedList[_Entry]:
        return self._buckets[self._hash(key) % len(self._buckets)]

    def _resize(self) -> None:
        old = self._buckets
        self._buckets = [LinkedList() for _ in range(len(old) * 2)]
        for bucket in old:
            for entry in bucket:
                self._bucket(entry.key).insert(entry)

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key`` unless the key is already present."""
        bucket = self._bucket(key)
        if bucket.search(key, key=_entry_key) is not None:
            return
        bucket.insert(_Entry(key, value))
        self._count += 1
        if self._count >= len(self._buckets):
            self._resize()

    def get(self, key: Any) -> Optional[Any]:
        """Return the value stored under ``key``, or ``None`` if absent."""
        entry = self._bucket(key).search(key, key=_entry_key)
        return entry.value if entry is not None else None

    def delete(self, key: Any) -> Any:
        """Remove ``key`` and return its value; raise ``KeyError`` if absent."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                bucket.delete(position)
                self._count -= 1
                return entry.value
        raise KeyError(key)

    def keys(self) -> List[Any]:
        """Return all keys in bucket order."""
        return list(self)

    def bucket_keys(self) -> List[List[Any]]:
        """Return the keys held by each bucket, one list per bucket."""
        return [[entry.key for entry in bucket] for bucket in self._buckets]

    def __contains__(self, key: Any) -> bool:
        try:
            return self._bucket(key).search(key, key=_entry_key) is not None
        except (TypeError, OverflowError):
            return False

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key_type.name}, {self.keys()!r})"