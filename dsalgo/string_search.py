"""Substring search: naive scanning, Boyer-Moore-Horspool, KMP and suffix arrays."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Dict, List, Optional, Sequence


def naive_search(text: str, pattern: str) -> List[int]:
    """Return every index of ``text`` at which ``pattern`` starts.

    Every position is tried in turn. An empty pattern matches at every
    index of ``text``.
    """
    return [index for index in range(len(text)) if text.startswith(pattern, index)]


def bmh_search(text: str, pattern: str) -> List[int]:
    """Return every start index of ``pattern`` in ``text`` using Boyer-Moore-Horspool.

    An empty pattern matches at every index of ``text``.
    """
    m, n = len(pattern), len(text)
    if m == 0:
        return list(range(n))

    # Bad-match table: distance from a character's last occurrence
    # (excluding the final position) to the end of the pattern.
    shift: Dict[str, int] = {char: m - 1 - i for i, char in enumerate(pattern[:-1])}

    matches: List[int] = []
    position = 0
    while position <= n - m:
        j = m - 1
        while j >= 0 and text[position + j] == pattern[j]:
            j -= 1
        if j < 0:
            matches.append(position)
        position += shift.get(text[position + m - 1], m)
    return matches


def _prefix_links(pattern: str) -> List[int]:
    """Return the failure links for every prefix length ``0..len(pattern)``."""
    links = [-1] * (len(pattern) + 1)
    i, j = 0, -1
    while i < len(pattern):
        if j == -1 or pattern[i] == pattern[j]:
            i += 1
            j += 1
            links[i] = j
        else:
            j = links[j]
    return links


def failure_array(pattern: str) -> List[int]:
    """Return the KMP failure array of ``pattern``.

    Entry ``i`` is the length of the longest proper border of
    ``pattern[:i]``; the first entry is ``-1``. Raises ``ValueError`` for an
    empty pattern.
    """
    if not pattern:
        raise ValueError("failure array of an empty pattern")
    return _prefix_links(pattern)[:-1]


def kmp_search(text: str, pattern: str) -> List[int]:
    """Return every start index of ``pattern`` in ``text`` using Knuth-Morris-Pratt.

    An empty pattern matches at every index of ``text``.
    """
    m = len(pattern)
    if m == 0:
        return list(range(len(text)))

    links = _prefix_links(pattern)
    matches: List[int] = []
    j = 0
    for i, char in enumerate(text):
        while j != -1 and char != pattern[j]:
            j = links[j]
        j += 1
        if j == m:
            matches.append(i - m + 1)
            j = links[m]
    return matches


def suffix_array(text: str) -> List[int]:
    """Return the start indexes of the suffixes of ``text`` in sorted suffix order."""
    return sorted(range(len(text)), key=lambda start: text[start:])


def suffix_search(text: str, pattern: str, suffixes: Optional[Sequence[int]] = None) -> List[int]:
    """Return every start index of ``pattern`` in ``text``, ascending.

    Binary search over the suffix array ``suffixes`` (built from ``text`` when
    not given) finds the run of suffixes that begin with ``pattern``.
    """
    if suffixes is None:
        suffixes = suffix_array(text)
    m = len(pattern)

    def prefix(start: int) -> str:
        return text[start:start + m]

    low = bisect_left(suffixes, pattern, key=prefix)
    high = bisect_right(suffixes, pattern, key=prefix)
    return sorted(suffixes[low:high])