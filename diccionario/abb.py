"""Ordered dictionary backed by an unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from diccionario.base import (
    DictionaryIterator,
    IteratorExhaustedError,
    KeyNotFoundError,
    OrderedDictionary,
    Visitor,
)

K = TypeVar("K")
V = TypeVar("V")

Comparator = Callable[[Any, Any], int]


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass
class _Node:
    key: Any
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class _TreeIterator(DictionaryIterator[K, V]):
    """In-order iterator over the nodes whose keys fall within a range."""

    def __init__(
        self,
        root: Optional[_Node],
        cmp: Comparator,
        start: Optional[K],
        end: Optional[K],
    ) -> None:
        self._cmp = cmp
        self._start = start
        self._end = end
        self._stack: list[_Node] = []
        self._descend(root)

    def _descend(self, node: Optional[_Node]) -> None:
        while node is not None:
            if self._start is None or self._cmp(self._start, node.key) <= 0:
                self._stack.append(node)
                node = node.left
            else:
                node = node.right

    def _top(self) -> _Node:
        if not self.has_next():
            raise IteratorExhaustedError()
        return self._stack[-1]

    def has_next(self) -> bool:
        if not self._stack:
            return False
        return self._end is None or self._cmp(self._end, self._stack[-1].key) >= 0

    def current(self) -> tuple[K, V]:
        top = self._top()
        return top.key, top.value

    def advance(self) -> None:
        self._top()
        self._descend(self._stack.pop().right)


class BinarySearchTree(OrderedDictionary[K, V], Generic[K, V]):
    """Ordered dictionary using ``cmp(a, b)`` (negative, zero, positive).

    Without a comparator the keys' natural ordering is used.
    """

    def __init__(self, cmp: Optional[Comparator] = None) -> None:
        self._cmp: Comparator = cmp if cmp is not None else _natural_order
        self._root: Optional[_Node] = None
        self._count = 0

    def _locate(self, key: K) -> tuple[Optional[_Node], Optional[_Node]]:
        """Return the parent of the node holding ``key`` and that node, or None."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None:
            order = self._cmp(key, node.key)
            if order == 0:
                return parent, node
            parent = node
            node = node.left if order < 0 else node.right
        return parent, None

    def _require(self, key: K) -> tuple[Optional[_Node], _Node]:
        parent, node = self._locate(key)
        if node is None:
            raise KeyNotFoundError(key)
        return parent, node

    def _relink(
        self, parent: Optional[_Node], node: _Node, child: Optional[_Node]
    ) -> None:
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def save(self, key: K, value: V) -> None:
        parent, node = self._locate(key)
        if node is not None:
            node.value = value
            return
        new = _Node(key, value)
        if parent is None:
            self._root = new
        elif self._cmp(key, parent.key) < 0:
            parent.left = new
        else:
            parent.right = new
        self._count += 1

    def contains(self, key: K) -> bool:
        return self._locate(key)[1] is not None

    def get(self, key: K) -> V:
        return self._require(key)[1].value

    def delete(self, key: K) -> V:
        parent, node = self._require(key)
        removed = node.value
        self._count -= 1
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            if successor_parent is node:
                node.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            self._relink(parent, node, child)
        return removed

    def __len__(self) -> int:
        return self._count

    def iterate(self, visit: Visitor) -> None:
        self.iterate_range(None, None, visit)

    def iterator(self) -> DictionaryIterator[K, V]:
        return self.range_iterator(None, None)

    def iterate_range(
        self, start: Optional[K], end: Optional[K], visit: Visitor
    ) -> None:
        for key, value in self.range_iterator(start, end):
            if not visit(key, value):
                return

    def range_iterator(
        self, start: Optional[K], end: Optional[K]
    ) -> DictionaryIterator[K, V]:
        return _TreeIterator(self._root, self._cmp, start, end)