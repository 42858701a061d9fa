"""Hash functions shared by the hash-based containers.

Both functions reproduce fixed-width integer arithmetic so that the values
they produce are stable 32-bit unsigned integers.
"""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_INT_MULTIPLIER = 0x45D9F3B


def _to_int32(x: int) -> int:
    """Wrap ``x`` into the signed 32-bit range."""
    x &= _MASK32
    return x - (1 << 32) if x & 0x80000000 else x


def hash_string(s: str) -> int:
    """Return the djb2 hash (``hash * 33 ^ byte``) of ``s`` as a 32-bit value.

    The string is hashed as UTF-8 bytes, each byte treated as a signed char.
    """
    value = 5381
    for byte in s.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = ((value * 33) ^ (signed & _MASK64)) & _MASK64
    return value & _MASK32


def hash_int(x: int) -> int:
    """Return an integer mixing hash of ``x`` as a 32-bit unsigned value.

    ``x`` is first wrapped to a signed 32-bit integer.
    """
    x = _to_int32(x)
    x = _to_int32(((x >> 16) ^ x) * _INT_MULTIPLIER)
    x = _to_int32(((x >> 16) ^ x) * _INT_MULTIPLIER)
    x = (x >> 16) ^ x
    return x & _MASK32