"""A standard Bloom filter sized for a 0.1% false-positive rate."""

from __future__ import annotations

import math
from typing import List, Union

from dsalgo.hashing import hash_int, hash_string

_FALSE_POSITIVE_RATE = 0.001
_SALT = 0x9E3779B97F4A7C15
# The salt is appended to string keys as its signed decimal form, cut to
# eight characters.
_SALT_SUFFIX = str(_SALT - (1 << 64))[:8]

Key = Union[str, int]


def _round(x: float) -> int:
    """Round half away from zero."""
    return int(math.floor(abs(x) + 0.5)) * (1 if x >= 0 else -1)


class BloomFilter:
    """Probabilistic set of strings and integers with no false negatives.

    The bit count ``m`` and the number of hash functions ``k`` are derived
    from the expected number of elements.
    """

    def __init__(self, expected_count: int) -> None:
        if isinstance(expected_count, bool) or not isinstance(expected_count, int):
            raise TypeError("expected_count must be an integer")
        if expected_count <= 0:
            raise ValueError("expected_count must be positive")

        n = expected_count
        m = _round(-(n * math.log(_FALSE_POSITIVE_RATE) / math.log(2) ** 2))
        k = _round((m // n) * math.log(2))

        self.bit_count: int = m
        self.hash_count: int = k
        self._bits = bytearray(m // 8 + 8)

    def _indexes(self, key: Key) -> List[int]:
        if isinstance(key, str):
            first = hash_string(key)
            second = hash_string(key + _SALT_SUFFIX)
        elif isinstance(key, int) and not isinstance(key, bool):
            first = hash_int(key)
            second = hash_int(key + _SALT)
        else:
            raise TypeError(f"key must be str or int, not {type(key).__name__}")
        return [(first + i * second) % self.bit_count for i in range(self.hash_count)]

    def _get_bit(self, index: int) -> bool:
        return bool(self._bits[index // 8] & (1 << (index % 8)))

    def add(self, key: Key) -> None:
        """Record ``key`` in the filter."""
        for index in self._indexes(key):
            self._bits[index // 8] |= 1 << (index % 8)

    def __contains__(self, key: Key) -> bool:
        """Return ``True`` if ``key`` may have been added, ``False`` if it was not."""
        return all(self._get_bit(index) for index in self._indexes(key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bit_count={self.bit_count}, hash_count={self.hash_count})"