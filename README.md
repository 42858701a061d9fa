# dsalgo

Classic data structures and algorithms in plain Python, with no third-party
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.linked_list` | `LinkedList`: singly linked list with indexed `insert` and `delete` (index `-1` means the end), `reverse`, `search` (optionally by a `key` function), `map` |
| `dsalgo.stack` | `Stack`: LIFO stack with `push`, `pop`, `peek`, `is_empty` |
| `dsalgo.queue` | `Queue`: FIFO queue with `enqueue`, `dequeue`, `peek`, `is_empty` |
| `dsalgo.hashing` | `hash_string` (djb2 over UTF-8 bytes) and `hash_int` (integer mixer), both returning 32-bit unsigned values |
| `dsalgo.hash_table` | `HashTable` with separate chaining, keyed by `KeyType.STRING`, `KeyType.INT` or `KeyType.CHAR` |
| `dsalgo.skip_list` | `SkipList`: sorted skip list of up to 16 levels, with `insert`, `search`, `levels` |
| `dsalgo.bloom_filter` | `BloomFilter` sized for a 0.1% false-positive rate, with `add` and `in` |
| `dsalgo.cuckoo_filter` | `CuckooFilter` with four 8-bit fingerprint slots per bucket, with `add`, `remove` and `in` |
| `dsalgo.sorting` | `bubble_sort`, `insertion_sort`, `heapify`, `heapsort`, `merge_sort`, `quicksort`, `hoare_partition`, `lomuto_partition`, `median_of_three`, `is_sorted`, `bogosort` |
| `dsalgo.searching` | `binary_search`, `recursive_binary_search`, `multi_key_binary_search`, `linear_search` |
| `dsalgo.string_search` | `naive_search`, `bmh_search`, `failure_array`, `kmp_search`, `suffix_array`, `suffix_search` |
| `dsalgo.tree` | `Node`, `generate_tree`, `add_node_left`, `add_node_right`, and `inorder`, `preorder`, `postorder` generators |
| `dsalgo.binary_search_tree` | `BinarySearchTree` of distinct values with `insert`, `delete`, `preorder`, `to_array` |
| `dsalgo.graph_search` | `adjacent`, `dfs`, `bfs` over adjacency matrices, and `EXAMPLE_GRAPH` |
| `dsalgo.benchmark` | `load_addresses`, `benchmark_hash_table`, `benchmark_cuckoo_filter`, `BenchmarkResult`, and the `dsalgo-bench` command |

## Behaviour worth knowing

- The sorting functions return a new sorted list and leave their input
  alone; `hoare_partition` and `lomuto_partition` work in place on a range.
- The search functions return an index, or `None` when nothing matches;
  `multi_key_binary_search` returns every matching index in ascending order.
- The string search functions return every start index of the pattern.
- `HashTable.insert` leaves the stored value unchanged when the key is
  already present, and the table doubles its bucket count once the number
  of keys reaches the number of buckets. `delete` raises `KeyError` for a
  missing key; `get` returns `None`.
- `CuckooFilter.add` raises `OverflowError` when the filter is full, and
  `remove` raises `KeyError` when no matching fingerprint is stored.
- `BinarySearchTree.insert` raises `ValueError` for a duplicate value and
  `delete` raises `KeyError` for a missing one.
- `SkipList`, `CuckooFilter` and `bogosort` accept a `random.Random`
  instance so that their behaviour can be made repeatable.

## Examples

```python
from dsalgo.linked_list import LinkedList
from dsalgo.hash_table import HashTable, KeyType
from dsalgo.bloom_filter import BloomFilter
from dsalgo.sorting import merge_sort
from dsalgo.string_search import kmp_search
from dsalgo.graph_search import EXAMPLE_GRAPH, bfs

items = LinkedList(["Hello World", "Jimbob", "Wagwan"])
items.insert("first", 0)
print(list(items))        # ['first', 'Hello World', 'Jimbob', 'Wagwan']

table = HashTable(KeyType.STRING, 10)
table.insert("apple", 1)
print(table.get("apple"), "apple" in table)   # 1 True

seen = BloomFilter(1000)
seen.add("10.0.0.1")
print("10.0.0.1" in seen)  # True

print(merge_sort([5, 3, 9, 1]))               # [1, 3, 5, 9]
print(kmp_search("abracadabra", "abra"))      # [0, 7]
print(bfs(EXAMPLE_GRAPH, 0))
```

## Benchmark command

`dsalgo-bench` loads a file of addresses (one per line, blank lines skipped)
into either a hash table or a cuckoo filter, then times lookups of two more
address files and prints the counts and elapsed times:

```
dsalgo-bench addresses.txt
dsalgo-bench addresses.txt --structure cuckoo-filter
dsalgo-bench addresses.txt --present present.txt --absent not_present.txt
```

- `--structure` is `hash-table` (the default) or `cuckoo-filter`; one
  structure is measured per run.
- `--present` names the addresses expected to be found (default
  `present.txt`), and `--absent` those expected to be missing (default
  `not_present.txt`), both relative to the current directory.

If any of the files cannot be opened, the command prints an error and exits
with status 1.