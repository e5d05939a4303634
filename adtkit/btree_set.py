"""An ordered set of unique values backed by a (3,5) B-tree."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from adtkit.btree import BTree, CompareFunc, DestroyFunc, SetNode


class BTreeSet:
    """Ordered set: values are ordered by ``compare``, each appears at most once.

    If ``destroy_value`` is given, it is called with every value that leaves
    the set, whether removed, replaced by an equivalent value, or cleared.
    """

    def __init__(self, compare: CompareFunc, destroy_value: Optional[DestroyFunc] = None) -> None:
        self._tree = BTree(compare)
        self._size = 0
        self.destroy_value = destroy_value

    @property
    def compare(self) -> CompareFunc:
        return self._tree.compare

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return self._tree.values()

    def __contains__(self, value: Any) -> bool:
        return self._tree.find_node(value) is not None

    def __repr__(self) -> str:
        return f"BTreeSet({list(self)!r})"

    def _destroy(self, value: Any) -> None:
        if self.destroy_value is not None:
            self.destroy_value(value)

    def insert(self, value: Any) -> None:
        """Add ``value``, replacing any equivalent value already stored."""
        inserted, old = self._tree.insert(value)
        if inserted:
            self._size += 1
        else:
            self._destroy(old)

    def remove(self, value: Any) -> bool:
        """Remove the value equivalent to ``value``; return whether one was found."""
        removed, old = self._tree.remove(value)
        if removed:
            self._size -= 1
            self._destroy(old)
        return removed

    def find(self, value: Any) -> Any:
        """Return the stored value equivalent to ``value``, or None."""
        node = self._tree.find_node(value)
        return None if node is None else node.value

    def find_node(self, value: Any) -> Optional[SetNode]:
        """Return the node holding the value equivalent to ``value``, or None."""
        return self._tree.find_node(value)

    def first(self) -> Optional[SetNode]:
        """Return the node of the smallest value, or None if the set is empty."""
        return self._tree.min_node()

    def last(self) -> Optional[SetNode]:
        """Return the node of the largest value, or None if the set is empty."""
        return self._tree.max_node()

    def next(self, node: SetNode) -> Optional[SetNode]:
        """Return the node after ``node`` in order, or None."""
        return self._tree.successor(node)

    def previous(self, node: SetNode) -> Optional[SetNode]:
        """Return the node before ``node`` in order, or None."""
        return self._tree.predecessor(node)

    def set_destroy_value(self, destroy_value: Optional[DestroyFunc]) -> Optional[DestroyFunc]:
        """Replace the destroy callback and return the previous one."""
        old = self.destroy_value
        self.destroy_value = destroy_value
        return old

    def clear(self) -> None:
        """Remove every value, passing each to the destroy callback."""
        removed = list(self._tree.values())
        self._tree = BTree(self._tree.compare)
        self._size = 0
        for value in removed:
            self._destroy(value)

    def is_proper(self) -> bool:
        """Check that the underlying tree satisfies every B-tree invariant."""
        return self._tree.is_proper()