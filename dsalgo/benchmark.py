"""Timing of hash table and cuckoo filter lookups over address lists."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, List, Optional, Sequence, Tuple

from dsalgo.cuckoo_filter import CuckooFilter
from dsalgo.hash_table import HashTable, KeyType

HASH_TABLE_BUCKETS = 1_000_000
CUCKOO_FILTER_CAPACITY = 10_000_000

HASH_TABLE = "hash table"
CUCKOO_FILTER = "cuckoo filter"


@dataclass(frozen=True)
class BenchmarkResult:
    """Counts and elapsed seconds from one benchmark run."""

    structure: str
    inserted: int
    insert_seconds: float
    found: int
    missed: int
    present_seconds: float
    true_negatives: int
    false_positives: int
    absent_seconds: float


def load_addresses(path: str) -> List[str]:
    """Return the non-empty lines of ``path`` with the trailing newline removed."""
    with open(path, encoding="utf-8") as handle:
        lines = (line[:-1] if line.endswith("\n") else line for line in handle)
        return [line for line in lines if line]


def _lookups(contains: Callable[[str], bool], keys: Sequence[str]) -> Tuple[int, int, float]:
    """Return hits, misses and elapsed seconds of looking up every key."""
    start = perf_counter()
    hits = sum(1 for key in keys if contains(key))
    return hits, len(keys) - hits, perf_counter() - start


def benchmark_hash_table(
    addresses: Sequence[str], present: Sequence[str], absent: Sequence[str]
) -> BenchmarkResult:
    """Insert ``addresses`` into a hash table and time lookups of the other lists."""
    table = HashTable(KeyType.STRING, HASH_TABLE_BUCKETS)
    start = perf_counter()
    for address in addresses:
        table.insert(address, 1)
    insert_seconds = perf_counter() - start

    def contains(key: str) -> bool:
        return table.get(key) is not None

    found, missed, present_seconds = _lookups(contains, present)
    false_positives, true_negatives, absent_seconds = _lookups(contains, absent)
    return BenchmarkResult(
        HASH_TABLE, len(addresses), insert_seconds,
        found, missed, present_seconds,
        true_negatives, false_positives, absent_seconds,
    )


def benchmark_cuckoo_filter(
    addresses: Sequence[str], present: Sequence[str], absent: Sequence[str]
) -> BenchmarkResult:
    """Insert ``addresses`` into a cuckoo filter and time lookups of the other lists.

    Insertions that fail because the filter is full still count as inserted.
    """
    cuckoo = CuckooFilter(CUCKOO_FILTER_CAPACITY)
    start = perf_counter()
    for address in addresses:
        try:
            cuckoo.add(address)
        except OverflowError:
            pass
    insert_seconds = perf_counter() - start

    found, missed, present_seconds = _lookups(cuckoo.__contains__, present)
    false_positives, true_negatives, absent_seconds = _lookups(cuckoo.__contains__, absent)
    return BenchmarkResult(
        CUCKOO_FILTER, len(addresses), insert_seconds,
        found, missed, present_seconds,
        true_negatives, false_positives, absent_seconds,
    )


def _report(result: BenchmarkResult) -> List[str]:
    if result.structure == HASH_TABLE:
        header = [
            "Inserting addresses into hash table",
            f"Insertion elapsed time: {result.insert_seconds:.6f} seconds",
        ]
        miss_label = "Missed"
    else:
        header = [
            "Inserting Addresses",
            f"{result.inserted} addresses insertion elapsed time: "
            f"{result.insert_seconds:.6f} seconds",
        ]
        miss_label = "False negatives"
    return header + [
        "Running Lookup Test 1",
        f"Lookup Test 1 Elapsed Time: {result.present_seconds:.6f} seconds",
        f"Found: {result.found}",
        f"{miss_label}: {result.missed}",
        "Running Lookup Test 2",
        f"Lookup Test 2 Elapsed Time: {result.absent_seconds:.6f} seconds",
        f"True Negatives: {result.true_negatives}",
        f"False Positives: {result.false_positives}",
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a benchmark from the command line and print its report."""
    parser = argparse.ArgumentParser(
        prog="dsalgo-benchmark",
        description="Time insertions and lookups of addresses.",
    )
    parser.add_argument("address_file", help="file of addresses to insert, one per line")
    parser.add_argument(
        "--structure", choices=("hash-table", "cuckoo-filter"), default="hash-table"
    )
    parser.add_argument("--present", default="present.txt", help="addresses expected to be found")
    parser.add_argument("--absent", default="not_present.txt", help="addresses expected to be absent")
    args = parser.parse_args(argv)

    try:
        addresses = load_addresses(args.address_file)
        present = load_addresses(args.present)
        absent = load_addresses(args.absent)
    except OSError as error:
        print(f"Error opening file: {error}", file=sys.stderr)
        return 1

    run = benchmark_hash_table if args.structure == "hash-table" else benchmark_cuckoo_filter
    for line in _report(run(addresses, present, absent)):
        print(line)
    return 0