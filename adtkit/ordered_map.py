"""An ordered key/value map built on top of the B-tree set."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

from adtkit.btree import CompareFunc, DestroyFunc
from adtkit.btree_set import BTreeSet


@dataclass(eq=False)
class MapNode:
    """One key/value association stored in an :class:`OrderedMap`."""

    key: Any
    value: Any = None


class OrderedMap:
    """Map from keys to values, with keys ordered by ``compare``.

    If ``destroy_key`` or ``destroy_value`` is given, it is called with every
    key or value that leaves the map, whether removed, replaced or cleared.
    """

    def __init__(
        self,
        compare: CompareFunc,
        destroy_key: Optional[DestroyFunc] = None,
        destroy_value: Optional[DestroyFunc] = None,
    ) -> None:
        if compare is None:
            raise TypeError("compare function is required")
        self.compare = compare
        self.destroy_key = destroy_key
        self.destroy_value = destroy_value
        self._set = BTreeSet(self._compare_nodes, self._destroy_node)

    def _compare_nodes(self, a: MapNode, b: MapNode) -> int:
        return self.compare(a.key, b.key)

    def _destroy_node(self, node: MapNode) -> None:
        if self.destroy_key is not None:
            self.destroy_key(node.key)
        if self.destroy_value is not None:
            self.destroy_value(node.value)

    def __len__(self) -> int:
        return len(self._set)

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._set)

    def __contains__(self, key: Any) -> bool:
        return self.find_node(key) is not None

    def __repr__(self) -> str:
        return f"OrderedMap({dict(self.items())!r})"

    def insert(self, key: Any, value: Any) -> None:
        """Associate ``key`` with ``value``, replacing an equivalent key and its value."""
        node = self.find_node(key)
        if node is None:
            self._set.insert(MapNode(key, value))
            return
        if key is not node.key and self.destroy_key is not None:
            self.destroy_key(node.key)
        if value is not node.value and self.destroy_value is not None:
            self.destroy_value(node.value)
        node.key = key
        node.value = value

    def remove(self, key: Any) -> bool:
        """Remove the key equivalent to ``key``; return whether one was found."""
        node = self.find_node(key)
        if node is None:
            return False
        self._set.remove(node)
        return True

    def find(self, key: Any) -> Any:
        """Return the value for ``key``, or None if the key is absent."""
        node = self.find_node(key)
        return None if node is None else node.value

    def find_node(self, key: Any) -> Optional[MapNode]:
        """Return the node for ``key``, or None if the key is absent."""
        return self._set.find(MapNode(key))

    def first(self) -> Optional[MapNode]:
        """Return the first node, or None if the map is empty."""
        set_node = self._set.first()
        return None if set_node is None else set_node.value

    def next(self, node: MapNode) -> Optional[MapNode]:
        """Return the node after ``node``, or None if it is the last."""
        set_node = self._set.find_node(node)
        if set_node is None:
            raise KeyError(node.key)
        following = self._set.next(set_node)
        return None if following is None else following.value

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        return ((node.key, node.value) for node in self._set)

    def set_destroy_key(self, destroy_key: Optional[DestroyFunc]) -> Optional[DestroyFunc]:
        """Replace the key destroy callback and return the previous one."""
        old = self.destroy_key
        self.destroy_key = destroy_key
        return old

    def set_destroy_value(self, destroy_value: Optional[DestroyFunc]) -> Optional[DestroyFunc]:
        """Replace the value destroy callback and return the previous one."""
        old = self.destroy_value
        self.destroy_value = destroy_value
        return old

    def clear(self) -> None:
        """Remove every association, passing keys and values to the destroy callbacks."""
        self._set.clear()