"""An unbalanced binary search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree that ignores duplicate keys."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, data: Any) -> bool:
        """Add ``data``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(data)
            self._size += 1
            return True
        node = self._root
        while True:
            if data == node.data:
                return False
            if data > node.data:
                if node.right is None:
                    node.right = _Node(data)
                    break
                node = node.right
            else:
                if node.left is None:
                    node.left = _Node(data)
                    break
                node = node.left
        self._size += 1
        return True

    def delete(self, data: Any) -> bool:
        """Remove ``data``; return False if it was not present.

        A node with two children takes the largest key of its left subtree.
        """
        parent: _Node | None = None
        node = self._root
        while node is not None and node.data != data:
            parent = node
            node = node.right if data > node.data else node.left
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            pred_parent, pred = node, node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.data = pred.data
            if pred_parent is node:
                pred_parent.left = pred.left
            else:
                pred_parent.right = pred.left
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1
        return True

    def find(self, data: Any) -> bool:
        """Return whether ``data`` is in the tree."""
        node = self._root
        while node is not None:
            if data == node.data:
                return True
            node = node.right if data > node.data else node.left
        return False

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when empty."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def _walk(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def in_order(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(self._walk())

    def __iter__(self) -> Iterator[Any]:
        return self._walk()

    def __contains__(self, data: object) -> bool:
        return self.find(data)

    def __len__(self) -> int:
        return self._size