"""B+ tree map with linked leaves and a three-way key comparator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Comparator = Callable[[Any, Any], int]
FreeFunc = Callable[[Any], None]

_MIN_ORDER = 3


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(eq=False)
class _Node:
    is_leaf: bool
    keys: list[Any] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)
    children: list["_Node"] = field(default_factory=list)
    next: Optional["_Node"] = None


class BPlusTree:
    """B+ tree of order ``order`` (at least 3): a node splits on reaching ``order`` keys.

    Values live in the leaves, which are chained left to right. Inserting an
    existing key replaces its value, releasing the old one through
    ``val_free``.
    """

    def __init__(
        self,
        order: int = 4,
        cmp: Optional[Comparator] = None,
        key_free: Optional[FreeFunc] = None,
        val_free: Optional[FreeFunc] = None,
    ) -> None:
        self.order = max(order, _MIN_ORDER)
        self._cmp = cmp if cmp is not None else _natural
        self._key_free = key_free
        self._val_free = val_free
        self._root: Optional[_Node] = None

    def _child_index(self, node: _Node, key: Any) -> int:
        i = 0
        while i < len(node.keys) and self._cmp(key, node.keys[i]) >= 0:
            i += 1
        return i

    def get(self, key: Any, default: Any = None) -> Any:
        """Value stored for ``key``, or ``default``."""
        node = self._root
        if node is None:
            return default
        while not node.is_leaf:
            node = node.children[self._child_index(node, key)]
        for stored, value in zip(node.keys, node.values):
            if self._cmp(key, stored) == 0:
                return value
        return default

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` or replace its value."""
        if self._root is None:
            self._root = _Node(is_leaf=True, keys=[key], values=[value])
            return

        parents: list[_Node] = []
        leaf = self._root
        while not leaf.is_leaf:
            parents.append(leaf)
            leaf = leaf.children[self._child_index(leaf, key)]

        i = 0
        while i < len(leaf.keys) and self._cmp(key, leaf.keys[i]) > 0:
            i += 1

        if i < len(leaf.keys) and self._cmp(key, leaf.keys[i]) == 0:
            old = leaf.values[i]
            if self._val_free is not None and old is not None:
                self._val_free(old)
            leaf.values[i] = value
            return

        leaf.keys.insert(i, key)
        leaf.values.insert(i, value)

        if len(leaf.keys) >= self.order:
            split = (self.order + 1) // 2
            new_leaf = _Node(
                is_leaf=True,
                keys=leaf.keys[split:],
                values=leaf.values[split:],
                next=leaf.next,
            )
            del leaf.keys[split:]
            del leaf.values[split:]
            leaf.next = new_leaf
            self._insert_parent(leaf, new_leaf.keys[0], new_leaf, parents)

    def _insert_parent(self, left: _Node, key: Any, right: _Node, parents: list[_Node]) -> None:
        if not parents:
            self._root = _Node(is_leaf=False, keys=[key], children=[left, right])
            return

        parent = parents.pop()
        left_index = next(pos for pos, child in enumerate(parent.children) if child is left)
        parent.keys.insert(left_index, key)
        parent.children.insert(left_index + 1, right)

        if len(parent.keys) >= self.order:
            split = (self.order + 1) // 2
            up_key = parent.keys[split]
            new_node = _Node(
                is_leaf=False,
                keys=parent.keys[split + 1:],
                children=parent.children[split + 1:],
            )
            del parent.keys[split:]
            del parent.children[split + 1:]
            self._insert_parent(parent, up_key, new_node, parents)

    def _leaves(self) -> Iterator[_Node]:
        node = self._root
        if node is None:
            return
        while not node.is_leaf:
            node = node.children[0]
        leaf: Optional[_Node] = node
        while leaf is not None:
            yield leaf
            leaf = leaf.next

    def items(self) -> Iterator[tuple[Any, Any]]:
        """(key, value) pairs in key order, walking the leaf chain."""
        for leaf in self._leaves():
            yield from zip(leaf.keys, leaf.values)

    def destroy(self) -> None:
        """Release every stored key and value and empty the tree."""
        for leaf in list(self._leaves()):
            for key, value in zip(leaf.keys, leaf.values):
                if self._val_free is not None and value is not None:
                    self._val_free(value)
                if self._key_free is not None and key is not None:
                    self._key_free(key)
        self._root = None