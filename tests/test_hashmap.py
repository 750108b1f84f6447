import random

import pytest

from ttakit.hashmap import IntMap, next_pow2


def test_next_pow2_zero():
    assert next_pow2(0) == 1


@pytest.mark.parametrize("n", [1, 2, 3, 5, 16, 17, 100, 1023, 1024, 1025])
def test_next_pow2_invariants(n):
    p = next_pow2(n)
    assert p >= n
    assert p & (p - 1) == 0
    assert p // 2 < n


def test_next_pow2_negative_rejected():
    with pytest.raises(ValueError):
        next_pow2(-1)


def test_capacity_rounded_to_power_of_two():
    m = IntMap(10)
    assert m.capacity == next_pow2(10)
    assert IntMap(16).capacity == 16


def test_insert_get_and_update():
    m = IntMap(16)
    m.insert(42, "a")
    assert m.get(42) == "a"
    m.insert(42, "b")
    assert m.get(42) == "b"
    assert len(m) == 1


def test_get_missing_returns_default():
    m = IntMap(8)
    assert m.get(7) is None
    assert m.get(7, "missing") == "missing"
    assert 7 not in m


def test_delete():
    m = IntMap(8)
    m.insert(1, 10)
    m.insert(2, 20)
    assert m.delete(1) is True
    assert 1 not in m
    assert m.get(2) == 20
    assert m.delete(1) is False
    assert len(m) == 1


def test_growth_at_seventy_percent():
    m = IntMap(16)
    for k in range(12):
        m.insert(k, k)
    assert m.capacity == 16
    m.insert(12, 12)
    assert m.capacity == 32
    assert all(m.get(k) == k for k in range(13))


def test_shrink_when_sparse_and_large():
    m = IntMap(16384)
    for k in range(10):
        m.insert(k, k * 2)
    m.delete(0)
    assert m.capacity == 16384 // 2
    assert dict(m.items()) == {k: k * 2 for k in range(1, 10)}
    m.delete(1)
    assert m.capacity == 16384 // 2


def test_key_validation():
    m = IntMap(8)
    with pytest.raises(ValueError):
        m.insert(-1, 0)
    with pytest.raises(ValueError):
        m.insert(1 << 64, 0)
    with pytest.raises(TypeError):
        m.insert("a", 0)
    assert -1 not in m