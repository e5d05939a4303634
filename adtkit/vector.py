"""A growable array with optional destroy callbacks and node traversal."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from adtkit.btree import CompareFunc, DestroyFunc


class VectorNode:
    """A position in a :class:`Vector`."""

    __slots__ = ("_vector", "index")

    def __init__(self, vector: Vector, index: int) -> None:
        self._vector = vector
        self.index = index

    @property
    def value(self) -> Any:
        return self._vector[self.index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorNode):
            return NotImplemented
        return self._vector is other._vector and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self._vector), self.index))

    def __repr__(self) -> str:
        return f"VectorNode({self.index})"


class Vector:
    """Variable-size array; elements start as None.

    If ``destroy_value`` is given, it is called with every element that is
    removed or replaced.
    """

    def __init__(self, size: int = 0, destroy_value: Optional[DestroyFunc] = None) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._items: list[Any] = [None] * size
        self.destroy_value = destroy_value

    def _destroy(self, value: Any) -> None:
        if self.destroy_value is not None:
            self.destroy_value(value)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError(f"position {pos} out of range")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def __getitem__(self, pos: int) -> Any:
        self._check(pos)
        return self._items[pos]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._check(pos)
        old = self._items[pos]
        if value is not old:
            self._destroy(old)
        self._items[pos] = value

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self._items.append(value)

    def remove_last(self) -> None:
        """Remove the last element."""
        if not self._items:
            raise IndexError("remove_last from an empty vector")
        self._destroy(self._items.pop())

    def find(self, value: Any, compare: CompareFunc) -> Any:
        """Return the first element equal to ``value`` under ``compare``, or None."""
        node = self.find_node(value, compare)
        return None if node is None else node.value

    def find_node(self, value: Any, compare: CompareFunc) -> Optional[VectorNode]:
        """Return the node of the first element equal to ``value``, or None."""
        for index, item in enumerate(self._items):
            if compare(item, value) == 0:
                return VectorNode(self, index)
        return None

    def first(self) -> Optional[VectorNode]:
        return VectorNode(self, 0) if self._items else None

    def last(self) -> Optional[VectorNode]:
        return VectorNode(self, len(self._items) - 1) if self._items else None

    def next(self, node: VectorNode) -> Optional[VectorNode]:
        """Return the node after ``node``, or None if it is the last."""
        if node.index >= len(self._items) - 1:
            return None
        return VectorNode(self, node.index + 1)

    def previous(self, node: VectorNode) -> Optional[VectorNode]:
        """Return the node before ``node``, or None if it is the first."""
        if node.index <= 0:
            return None
        return VectorNode(self, node.index - 1)

    def set_destroy_value(self, destroy_value: Optional[DestroyFunc]) -> Optional[DestroyFunc]:
        """Replace the destroy callback and return the previous one."""
        old = self.destroy_value
        self.destroy_value = destroy_value
        return old

    def clear(self) -> None:
        """Remove every element, passing each to the destroy callback."""
        items, self._items = self._items, []
        for value in items:
            self._destroy(value)