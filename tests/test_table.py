import pytest

from ttakit.table import HashTable


def test_default_capacity_when_zero():
    assert HashTable(0).capacity == 16


def test_put_get_contains():
    t = HashTable()
    t.put(b"alpha", 1)
    t.put("beta", 2)
    assert t.get(b"alpha") == 1
    assert t.get("beta") == 2
    assert b"alpha" in t
    assert "gamma" not in t
    assert t.get("gamma", "none") == "none"
    assert len(t) == 2


def test_update_releases_old_value():
    freed = []
    t = HashTable(8, val_free=freed.append)
    t.put("k", "old")
    t.put("k", "new")
    assert t.get("k") == "new"
    assert freed == ["old"]
    assert len(t) == 1


def test_remove_releases_key_and_value():
    keys, values = [], []
    t = HashTable(8, key_free=keys.append, val_free=values.append)
    t.put("k", "v")
    assert t.remove("k") is True
    assert keys == ["k"]
    assert values == ["v"]
    assert len(t) == 0
    assert t.remove("k") is False


def test_none_value_not_released():
    freed = []
    t = HashTable(8, val_free=freed.append)
    t.put("k", None)
    t.put("k", 5)
    assert freed == []
    assert t.get("k") == 5


def test_clear_releases_all():
    keys = []
    t = HashTable(4, key_free=keys.append)
    for k in ["a", "b", "c", "d", "e"]:
        t.put(k, k.upper())
    t.clear()
    assert sorted(keys) == ["a", "b", "c", "d", "e"]
    assert len(t) == 0
    assert "a" not in t


def test_colliding_hash_function():
    t = HashTable(8, hash_func=lambda key, k0, k1: 0)
    for n in range(50):
        t.put(n, n * n)
    assert all(t.get(n) == n * n for n in range(50))
    assert t.remove(25) is True
    assert 25 not in t
    assert t.get(26) == 26 * 26
    assert len(t) == 49


def test_custom_hash_receives_keys():
    seen = []

    def hash_func(key, k0, k1):
        seen.append((key, k0, k1))
        return 3

    t = HashTable(8, hash_func=hash_func)
    t.put("x", 1)
    assert seen[0] == ("x", t.k0, t.k1)


def test_default_hash_rejects_unsupported_keys():
    t = HashTable()
    with pytest.raises(TypeError):
        t.put(3.5, 1)