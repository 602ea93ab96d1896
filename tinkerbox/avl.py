"""A self-balancing binary search tree usable as an ordered map or set."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class _Node:
    key: Any
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    height: int = 1

    def update_height(self) -> None:
        self.height = 1 + max(_height(self.left), _height(self.right))


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _rotate_right(node: _Node) -> _Node:
    left = node.left
    assert left is not None
    node.left = left.right
    node.update_height()
    left.right = node
    left.update_height()
    return left


def _rotate_left(node: _Node) -> _Node:
    right = node.right
    assert right is not None
    node.right = right.left
    node.update_height()
    right.left = node
    right.update_height()
    return right


def _left_heavy_rebalance(node: _Node) -> _Node:
    if _height(node.left) - _height(node.right) > 1:
        left = node.left
        assert left is not None
        if _height(left.right) > _height(left.left):
            node.left = _rotate_left(left)
        return _rotate_right(node)
    node.update_height()
    return node


def _right_heavy_rebalance(node: _Node) -> _Node:
    if _height(node.right) - _height(node.left) > 1:
        right = node.right
        assert right is not None
        if _height(right.left) > _height(right.right):
            node.right = _rotate_right(right)
        return _rotate_left(node)
    node.update_height()
    return node


def _set(node: Optional[_Node], key: Any, value: Any) -> tuple[_Node, bool, Any]:
    """Insert or replace; return the new subtree, whether the key existed, and the old value."""
    if node is None:
        return _Node(key, value), False, None
    if key == node.key:
        previous = node.value
        node.value = value
        return node, True, previous
    if key < node.key:
        node.left, existed, previous = _set(node.left, key, value)
        return _left_heavy_rebalance(node), existed, previous
    node.right, existed, previous = _set(node.right, key, value)
    return _right_heavy_rebalance(node), existed, previous


def _unset_max(node: _Node) -> tuple[Optional[_Node], tuple[Any, Any]]:
    if node.right is not None:
        node.right, removed = _unset_max(node.right)
        return _left_heavy_rebalance(node), removed
    return node.left, (node.key, node.value)


def _unset_min(node: _Node) -> tuple[Optional[_Node], tuple[Any, Any]]:
    if node.left is not None:
        node.left, removed = _unset_min(node.left)
        return _right_heavy_rebalance(node), removed
    return node.right, (node.key, node.value)


def _unset(node: Optional[_Node], key: Any) -> tuple[Optional[_Node], Optional[tuple[Any, Any]]]:
    if node is None:
        return None, None
    if key == node.key:
        removed = (node.key, node.value)
        if node.left is not None and node.right is not None:
            if node.left.height > node.right.height:
                node.left, (node.key, node.value) = _unset_max(node.left)
            else:
                node.right, (node.key, node.value) = _unset_min(node.right)
            node.update_height()
            return node, removed
        return (node.right if node.left is None else node.left), removed
    if key < node.key:
        node.left, removed = _unset(node.left, key)
        if removed is not None:
            node = _right_heavy_rebalance(node)
        return node, removed
    node.right, removed = _unset(node.right, key)
    if removed is not None:
        node = _left_heavy_rebalance(node)
    return node, removed


class AVLTree(Generic[K, V]):
    """An ordered map from keys to values; with ``None`` values it serves as a set."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._len = 0

    def set(self, key: K, value: V) -> Optional[V]:
        """Store ``value`` under ``key``; return the value it replaced, if any."""
        self._root, existed, previous = _set(self._root, key, value)
        if not existed:
            self._len += 1
        return previous

    def get(self, key: K) -> Optional[V]:
        """The value stored under ``key``, or ``None``."""
        node = self._find(key)
        return node.value if node is not None else None

    def unset(self, key: K) -> Optional[tuple[K, V]]:
        """Remove ``key``; return the removed ``(key, value)`` pair, or ``None``."""
        self._root, removed = _unset(self._root, key)
        if removed is not None:
            self._len -= 1
        return removed

    def contains(self, key: K) -> bool:
        return self._find(key) is not None

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in key order."""
        stack: list[_Node] = []
        node = self._root
        while True:
            while node is not None:
                stack.append(node)
                node = node.left
            if not stack:
                return
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def breadth_iter(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs level by level, left to right."""
        queue: deque[_Node] = deque()
        if self._root is not None:
            queue.append(self._root)
        while queue:
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
            yield node.key, node.value

    def add(self, element: K) -> bool:
        """Add an element to a set tree; True if it was not there before."""
        self._root, existed, _ = _set(self._root, element, None)
        if not existed:
            self._len += 1
        return not existed

    def remove(self, element: K) -> bool:
        """Remove an element from a set tree; True if it was there."""
        return self.unset(element) is not None

    def _find(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self)!r})"


AVLTreeMap = AVLTree
AVLTreeSet = AVLTree