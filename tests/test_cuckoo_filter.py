import random

import pytest

from dsalgo.cuckoo_filter import BUCKET_DEPTH, CuckooFilter


def make(count):
    return CuckooFilter(count, rng=random.Random(0))


def test_letters_are_present_after_insertion():
    cuckoo = make(40)
    letters = [chr(c) for c in range(ord("a"), ord("z") + 1)]
    for letter in letters:
        cuckoo.add(letter)
    assert all(letter in cuckoo for letter in letters)
    assert len(cuckoo) == len(letters)


def test_char_codes_are_present_after_insertion():
    cuckoo = make(40)
    codes = list(range(ord("a"), ord("z") + 1))
    for code in codes:
        cuckoo.add(code)
    assert all(code in cuckoo for code in codes)


def test_bucket_count_matches_expected_count():
    assert make(40).bucket_count == 40


def test_empty_filter_contains_nothing():
    cuckoo = make(16)
    assert "dog" not in cuckoo
    assert 7 not in cuckoo
    assert len(cuckoo) == 0


def test_remove_single_key():
    cuckoo = make(16)
    cuckoo.add("192.168.0.1")
    assert "192.168.0.1" in cuckoo
    cuckoo.remove("192.168.0.1")
    assert "192.168.0.1" not in cuckoo
    assert len(cuckoo) == 0


def test_remove_missing_key_raises():
    cuckoo = make(16)
    with pytest.raises(KeyError):
        cuckoo.remove("absent")


def test_duplicate_adds_need_two_removes():
    cuckoo = make(16)
    cuckoo.add(99)
    cuckoo.add(99)
    cuckoo.remove(99)
    assert 99 in cuckoo
    cuckoo.remove(99)
    assert 99 not in cuckoo


def test_full_single_bucket_raises_overflow():
    cuckoo = make(1)
    for _ in range(BUCKET_DEPTH):
        cuckoo.add("x")
    assert len(cuckoo) == BUCKET_DEPTH
    with pytest.raises(OverflowError):
        cuckoo.add("x")
    assert len(cuckoo) == BUCKET_DEPTH
    assert "x" in cuckoo


def test_many_keys_have_no_false_negatives():
    cuckoo = make(1000)
    keys = [f"10.1.{i // 256}.{i % 256}" for i in range(800)]
    for key in keys:
        cuckoo.add(key)
    assert all(key in cuckoo for key in keys)
    assert len(cuckoo) == 800


def test_invalid_expected_count():
    with pytest.raises(ValueError):
        CuckooFilter(0)
    with pytest.raises(TypeError):
        CuckooFilter("ten")


def test_unsupported_key_type():
    cuckoo = make(8)
    with pytest.raises(TypeError):
        cuckoo.add(2.5)
    with pytest.raises(TypeError):
        cuckoo.remove(None)