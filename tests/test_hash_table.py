import string

import pytest

from dsalgo.hash_table import HashTable, KeyType
from dsalgo.hashing import hash_int, hash_string


def test_char_keys_insert_get_delete():
    table = HashTable(KeyType.CHAR, 10)
    for c in string.ascii_lowercase:
        table.insert(c, 5)
    assert len(table) == 26
    for c in string.ascii_lowercase:
        assert table.get(c) == 5
    for c in string.ascii_lowercase:
        assert table.delete(c) == 5
    assert len(table) == 0
    assert table.keys() == []


def test_int_keys_example():
    table = HashTable(KeyType.INT, 10)
    for key in (1, 2323, 2, 3):
        table.insert(key, 234)
    assert sorted(table.keys()) == [1, 2, 3, 2323]
    assert table.delete(2) == 234
    with pytest.raises(KeyError):
        table.delete(2)
    assert sorted(table.keys()) == [1, 3, 2323]
    assert table.get(3) == 234


def test_get_missing_returns_none():
    table = HashTable(KeyType.STRING)
    table.insert("present", 1)
    assert table.get("absent") is None


def test_duplicate_insert_keeps_first_value():
    table = HashTable(KeyType.STRING)
    table.insert("key", 1)
    table.insert("key", 2)
    assert table.get("key") == 1
    assert len(table) == 1


def test_resize_keeps_all_keys():
    table = HashTable(KeyType.INT, 10)
    for key in range(9):
        table.insert(key, key * 10)
    assert len(table.bucket_keys()) == 10
    table.insert(9, 90)
    buckets = table.bucket_keys()
    assert len(buckets) > 10
    assert sum(len(b) for b in buckets) == 10
    for key in range(10):
        assert table.get(key) == key * 10


def test_int_keys_placed_by_hash():
    table = HashTable(KeyType.INT, 10)
    for key in (1, 2323, 2, 3):
        table.insert(key, None)
    buckets = table.bucket_keys()
    for key in (1, 2323, 2, 3):
        assert key in buckets[hash_int(key) % len(buckets)]


def test_string_keys_placed_by_hash():
    table = HashTable(KeyType.STRING, 50)
    words = ["Hello", "World", "Jimbob", "Wagwan"]
    for word in words:
        table.insert(word, len(word))
    buckets = table.bucket_keys()
    for word in words:
        assert word in buckets[hash_string(word) % len(buckets)]


def test_contains_and_iter():
    table = HashTable(KeyType.STRING)
    table.insert("a", 1)
    table.insert("b", 2)
    assert "a" in table
    assert "c" not in table
    assert 5 not in table
    assert sorted(table) == ["a", "b"]


@pytest.mark.parametrize(
    "key_type, bad_key",
    [(KeyType.STRING, 1), (KeyType.INT, "1"), (KeyType.INT, True), (KeyType.CHAR, "ab"), (KeyType.CHAR, 1)],
)
def test_wrong_key_type_raises(key_type, bad_key):
    table = HashTable(key_type)
    with pytest.raises(TypeError):
        table.insert(bad_key, 0)


def test_int_key_out_of_range():
    table = HashTable(KeyType.INT)
    with pytest.raises(OverflowError):
        table.insert(2**31, 0)


def test_invalid_bucket_count():
    with pytest.raises(ValueError):
        HashTable(KeyType.INT, 0)


def test_key_type_from_value():
    table = HashTable(2)
    assert table.key_type is KeyType.INT