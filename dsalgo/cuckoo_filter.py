"""A bit-packed cuckoo filter with four 8-bit slots per bucket."""

from __future__ import annotations

import random
from typing import Optional, Tuple, Union

from dsalgo.hashing import hash_int, hash_string

BUCKET_DEPTH = 4
FINGERPRINT_BITS = 7
MAX_KICK_COUNT = 500

_MASK32 = 0xFFFFFFFF
_FINGERPRINT_MULTIPLIER = 0x5BD1E995
_SLOT_OFFSETS = (0, 8, 16, 24)

Key = Union[str, int]


def _hash_fingerprint(fingerprint: int) -> int:
    return (fingerprint * _FINGERPRINT_MULTIPLIER) & _MASK32


def _slot(bucket: int, offset: int) -> int:
    return (bucket >> offset) & 0xFF


def _find_open_slot(bucket: int) -> Optional[int]:
    return next((offset for offset in _SLOT_OFFSETS if _slot(bucket, offset) == 0), None)


def _find_fingerprint(bucket: int, fingerprint: int) -> Optional[int]:
    return next((offset for offset in _SLOT_OFFSETS if _slot(bucket, offset) == fingerprint), None)


class CuckooFilter:
    """Probabilistic set of strings and integers that supports removal.

    Each bucket is a 32-bit word of four one-byte fingerprint slots; a zero
    byte marks an empty slot. Adding to a full filter raises ``OverflowError``
    after ``MAX_KICK_COUNT`` relocations, which may leave one previously
    stored fingerprint evicted.
    """

    def __init__(self, expected_count: int, rng: Optional[random.Random] = None) -> None:
        if isinstance(expected_count, bool) or not isinstance(expected_count, int):
            raise TypeError("expected_count must be an integer")
        if expected_count <= 0:
            raise ValueError("expected_count must be positive")
        self._rng = rng if rng is not None else random.Random()
        self.bucket_count: int = expected_count
        self._buckets = [0] * expected_count
        self._stored = 0

    def _locate(self, key: Key) -> Tuple[int, int, int]:
        if isinstance(key, str):
            h1 = hash_string(key)
        elif isinstance(key, int) and not isinstance(key, bool):
            h1 = hash_int(key)
        else:
            raise TypeError(f"key must be str or int, not {type(key).__name__}")
        bucket1 = h1 % self.bucket_count
        fingerprint = (h1 & ((1 << FINGERPRINT_BITS) - 1)) or 1
        bucket2 = (bucket1 ^ _hash_fingerprint(fingerprint)) % self.bucket_count
        return bucket1, bucket2, fingerprint

    def _relocate(self, bucket1: int, bucket2: int, fingerprint: int) -> bool:
        current = bucket2 if self._rng.randrange(2) else bucket1
        for _ in range(MAX_KICK_COUNT):
            offset = self._rng.randrange(BUCKET_DEPTH) * 8
            evicted = _slot(self._buckets[current], offset)
            if evicted == 0:
                self._buckets[current] |= fingerprint << offset
                return True
            self._buckets[current] &= ~(0xFF << offset) & _MASK32
            self._buckets[current] |= fingerprint << offset
            current = (current ^ _hash_fingerprint(evicted)) % self.bucket_count
            fingerprint = evicted
        return False

    def add(self, key: Key) -> None:
        """Store the fingerprint of ``key``; raise ``OverflowError`` if full."""
        bucket1, bucket2, fingerprint = self._locate(key)
        for bucket in (bucket1, bucket2):
            offset = _find_open_slot(self._buckets[bucket])
            if offset is not None:
                self._buckets[bucket] |= fingerprint << offset
                self._stored += 1
                return
        if not self._relocate(bucket1, bucket2, fingerprint):
            raise OverflowError("cuckoo filter is full")
        self._stored += 1

    def remove(self, key: Key) -> None:
        """Remove one fingerprint of ``key``; raise ``KeyError`` if none is stored."""
        bucket1, bucket2, fingerprint = self._locate(key)
        for bucket in (bucket1, bucket2):
            offset = _find_fingerprint(self._buckets[bucket], fingerprint)
            if offset is not None:
                self._buckets[bucket] &= ~(0xFF << offset) & _MASK32
                self._stored -= 1
                return
        raise KeyError(key)

    def __contains__(self, key: Key) -> bool:
        """Return ``True`` if ``key`` may be stored, ``False`` if it is not."""
        bucket1, bucket2, fingerprint = self._locate(key)
        return (
            _find_fingerprint(self._buckets[bucket1], fingerprint) is not None
            or _find_fingerprint(self._buckets[bucket2], fingerprint) is not None
        )

    def __len__(self) -> int:
        return self._stored

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bucket_count={self.bucket_count}, stored={self._stored})"