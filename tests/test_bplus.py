import random

import pytest

from ttakit.bplus import BPlusTree


def test_empty_tree_returns_default():
    tree = BPlusTree()
    assert tree.get(1) is None
    assert tree.get(1, "missing") == "missing"
    assert list(tree.items()) == []


@pytest.mark.parametrize("order", [3, 4, 5, 8])
def test_insert_and_get_many(order):
    keys = list(range(200))
    random.Random(order).shuffle(keys)
    tree = BPlusTree(order)
    for key in keys:
        tree.insert(key, f"v{key}")
    for key in keys:
        assert tree.get(key) == f"v{key}"
    assert tree.get(500, -1) == -1


@pytest.mark.parametrize("order", [3, 6])
def test_items_are_sorted(order):
    keys = list(range(100))
    random.Random(7).shuffle(keys)
    tree = BPlusTree(order)
    for key in keys:
        tree.insert(key, key * 2)
    assert list(tree.items()) == [(k, k * 2) for k in range(100)]


def test_order_is_clamped():
    assert BPlusTree(1).order == 3
    assert BPlusTree(10).order == 10


def test_update_replaces_value_and_frees_old():
    freed = []
    tree = BPlusTree(3, val_free=freed.append)
    for key in range(10):
        tree.insert(key, f"a{key}")
    tree.insert(4, "b4")
    assert tree.get(4) == "b4"
    assert freed == ["a4"]
    assert len(list(tree.items())) == 10


def test_custom_comparator_reverses_order():
    tree = BPlusTree(4, cmp=lambda a, b: (b > a) - (b < a))
    for key in range(20):
        tree.insert(key, key)
    assert [k for k, _ in tree.items()] == list(range(19, -1, -1))
    assert tree.get(13) == 13


def test_string_keys():
    words = ["pear", "apple", "fig", "kiwi", "date", "lime", "plum"]
    tree = BPlusTree(3)
    for word in words:
        tree.insert(word, len(word))
    assert [k for k, _ in tree.items()] == sorted(words)
    assert tree.get("kiwi") == len("kiwi")


def test_destroy_releases_everything():
    keys_freed = []
    values_freed = []
    tree = BPlusTree(3, key_free=keys_freed.append, val_free=values_freed.append)
    for key in range(30):
        tree.insert(key, -key - 1)
    tree.destroy()
    assert sorted(keys_freed) == list(range(30))
    assert sorted(values_freed) == sorted(-k - 1 for k in range(30))
    assert tree.get(5) is None
    assert list(tree.items()) == []


def test_destroy_on_empty_tree_is_noop():
    freed = []
    tree = BPlusTree(key_free=freed.append)
    tree.destroy()
    assert freed == []
    tree.insert(1, "x")
    assert tree.get(1) == "x"