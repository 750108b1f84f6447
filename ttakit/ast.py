"""Generic n-ary syntax tree with an optional payload release hook."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional


class AstNode:
    """Tree node with an integer type, a payload and ordered children."""

    def __init__(self, type: int, value: Any = None) -> None:
        self.type = type
        self.value = value
        self.children: list[AstNode] = []
        self.parent: Optional[AstNode] = None

    def add_child(self, child: "AstNode") -> None:
        """Append ``child`` and make this node its parent."""
        self.children.append(child)
        child.parent = self

    def __repr__(self) -> str:
        return f"AstNode(type={self.type!r}, value={self.value!r}, children={len(self.children)})"


def _post_order(root: AstNode) -> Iterator[AstNode]:
    stack: list[tuple[AstNode, bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        for child in reversed(node.children):
            stack.append((child, False))


class AstTree:
    """Tree holder; ``free_value`` is called on payloads when the tree is destroyed."""

    def __init__(self, free_value: Optional[Callable[[Any], None]] = None) -> None:
        self.root: Optional[AstNode] = None
        self.free_value = free_value

    def destroy(self) -> None:
        """Release every non-``None`` payload, children before parents, and drop the root."""
        if self.root is None:
            return
        for node in _post_order(self.root):
            if self.free_value is not None and node.value is not None:
                self.free_value(node.value)
            node.children = []
        self.root = None