"""Classic data structures and algorithms: lists, stacks, queues, hash tables,
skip lists, Bloom and cuckoo filters, sorting, searching, string search,
binary trees, graph traversal and a lookup benchmark."""

__version__ = "0.1.0"