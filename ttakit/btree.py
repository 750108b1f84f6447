"""B-tree map with a minimum degree and a three-way key comparator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Comparator = Callable[[Any, Any], int]
FreeFunc = Callable[[Any], None]

_MIN_DEGREE = 2


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(eq=False)
class _Node:
    leaf: bool
    keys: list[Any] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)
    children: list["_Node"] = field(default_factory=list)


class BTree:
    """B-tree of minimum degree ``t`` (at least 2): nodes hold up to ``2t - 1`` keys.

    Inserting a key that is already present adds another entry; ``search``
    returns the first match found from the root down.
    """

    def __init__(
        self,
        t: int = 2,
        cmp: Optional[Comparator] = None,
        key_free: Optional[FreeFunc] = None,
        val_free: Optional[FreeFunc] = None,
    ) -> None:
        self.t = max(t, _MIN_DEGREE)
        self._cmp = cmp if cmp is not None else _natural
        self._key_free = key_free
        self._val_free = val_free
        self._root: Optional[_Node] = None

    @property
    def _max_keys(self) -> int:
        return 2 * self.t - 1

    def _split_child(self, x: _Node, i: int) -> None:
        t = self.t
        y = x.children[i]
        z = _Node(leaf=y.leaf, keys=y.keys[t:], values=y.values[t:])
        if not y.leaf:
            z.children = y.children[t:]
            del y.children[t:]
        median_key = y.keys[t - 1]
        median_value = y.values[t - 1]
        del y.keys[t - 1:]
        del y.values[t - 1:]
        x.children.insert(i + 1, z)
        x.keys.insert(i, median_key)
        x.values.insert(i, median_value)

    def _insert_non_full(self, x: _Node, key: Any, value: Any) -> None:
        while True:
            i = len(x.keys) - 1
            while i >= 0 and self._cmp(key, x.keys[i]) < 0:
                i -= 1
            i += 1
            if x.leaf:
                x.keys.insert(i, key)
                x.values.insert(i, value)
                return
            if len(x.children[i].keys) == self._max_keys:
                self._split_child(x, i)
                if self._cmp(key, x.keys[i]) > 0:
                    i += 1
            x = x.children[i]

    def insert(self, key: Any, value: Any) -> None:
        """Add an entry for ``key``."""
        root = self._root
        if root is None:
            self._root = _Node(leaf=True, keys=[key], values=[value])
            return
        if len(root.keys) == self._max_keys:
            new_root = _Node(leaf=False, children=[root])
            self._root = new_root
            self._split_child(new_root, 0)
            root = new_root
        self._insert_non_full(root, key, value)

    def search(self, key: Any, default: Any = None) -> Any:
        """Value stored for ``key``, or ``default``."""
        node = self._root
        while node is not None:
            i = 0
            while i < len(node.keys) and self._cmp(key, node.keys[i]) > 0:
                i += 1
            if i < len(node.keys) and self._cmp(key, node.keys[i]) == 0:
                return node.values[i]
            if node.leaf:
                return default
            node = node.children[i]
        return default

    def _post_order(self) -> Iterator[_Node]:
        if self._root is None:
            return
        stack: list[tuple[_Node, bool]] = [(self._root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            for child in reversed(node.children):
                stack.append((child, False))

    def destroy(self) -> None:
        """Release every key and value, children before parents, and empty the tree."""
        for node in self._post_order():
            for key, value in zip(node.keys, node.values):
                if self._key_free is not None and key is not None:
                    self._key_free(key)
                if self._val_free is not None and value is not None:
                    self._val_free(value)
            node.children = []
        self._root = None