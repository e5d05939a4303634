"""Recursive binary trees: a root value with left and right subtrees."""

from __future__ import annotations

from typing import Any, Optional

EMPTY = None


class RecTree:
    """A binary tree node. The empty tree is ``None``.

    A tree whose value is None counts as holding no elements.
    """

    __slots__ = ("value", "left", "right", "_size")

    def __init__(
        self,
        value: Any,
        left: Optional[RecTree] = EMPTY,
        right: Optional[RecTree] = EMPTY,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right
        self._size = 0 if value is None else 1 + tree_size(left) + tree_size(right)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"RecTree({self.value!r}, {self.left!r}, {self.right!r})"


def tree_size(tree: Optional[RecTree]) -> int:
    """Return the number of elements in ``tree``, 0 for the empty tree."""
    return 0 if tree is None else len(tree)