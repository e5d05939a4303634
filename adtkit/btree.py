"""A (3,5) B-tree ordered by a user-supplied three-way comparison function."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

CompareFunc = Callable[[Any, Any], int]
DestroyFunc = Callable[[Any], None]

MIN_CHILDREN = 3
MAX_CHILDREN = 5
MIN_VALUES = MIN_CHILDREN - 1
MAX_VALUES = MAX_CHILDREN - 1


class SetNode:
    """A single stored value, together with the B-tree node that holds it."""

    __slots__ = ("value", "owner")

    def __init__(self, value: Any, owner: Optional[BTreeNode] = None) -> None:
        self.value = value
        self.owner = owner

    def __repr__(self) -> str:
        return f"SetNode({self.value!r})"


class BTreeNode:
    """A B-tree node: ordered set nodes plus, for inner nodes, one more child."""

    __slots__ = ("parent", "values", "children")

    def __init__(self, parent: Optional[BTreeNode] = None) -> None:
        self.parent = parent
        self.values: list[SetNode] = []
        self.children: list[BTreeNode] = []

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def _insert_value(self, index: int, set_node: SetNode) -> None:
        set_node.owner = self
        self.values.insert(index, set_node)

    def _insert_child(self, index: int, child: BTreeNode) -> None:
        child.parent = self
        self.children.insert(index, child)

    def _child_index(self, child: BTreeNode) -> int:
        return next(i for i, c in enumerate(self.children) if c is child)

    def _value_index(self, set_node: SetNode) -> int:
        return next(i for i, v in enumerate(self.values) if v is set_node)

    def __repr__(self) -> str:
        return f"BTreeNode({[v.value for v in self.values]!r})"


def _subtree_min(node: Optional[BTreeNode]) -> Optional[SetNode]:
    if node is None:
        return None
    while not node.is_leaf:
        node = node.children[0]
    return node.values[0]


def _subtree_max(node: Optional[BTreeNode]) -> Optional[SetNode]:
    if node is None:
        return None
    while not node.is_leaf:
        node = node.children[-1]
    return node.values[-1]


class BTree:
    """An ordered collection of unique values (under ``compare``) kept in a B-tree."""

    def __init__(self, compare: CompareFunc) -> None:
        if compare is None:
            raise TypeError("compare function is required")
        self.compare = compare
        self.root: Optional[BTreeNode] = None

    # -- searching ---------------------------------------------------------

    def _locate(self, value: Any) -> tuple[Optional[BTreeNode], Optional[int]]:
        """Return the node holding ``value`` and its index, or the leaf where it belongs and None."""
        node = self.root
        while node is not None:
            position = len(node.values)
            for i, set_node in enumerate(node.values):
                result = self.compare(value, set_node.value)
                if result == 0:
                    return node, i
                if result < 0:
                    position = i
                    break
            if node.is_leaf:
                return node, None
            node = node.children[position]
        return None, None

    def find_node(self, value: Any) -> Optional[SetNode]:
        """Return the set node equivalent to ``value``, or None."""
        node, index = self._locate(value)
        return None if node is None or index is None else node.values[index]

    def min_node(self) -> Optional[SetNode]:
        return _subtree_min(self.root)

    def max_node(self) -> Optional[SetNode]:
        return _subtree_max(self.root)

    def successor(self, node: SetNode) -> Optional[SetNode]:
        """Return the set node following ``node`` in order, or None if it is the last."""
        owner = node.owner
        index = owner._value_index(node)
        if not owner.is_leaf:
            return _subtree_min(owner.children[index + 1])
        if index + 1 < len(owner.values):
            return owner.values[index + 1]
        current = owner
        while current.parent is not None:
            parent = current.parent
            child_index = parent._child_index(current)
            if child_index < len(parent.values):
                return parent.values[child_index]
            current = parent
        return None

    def predecessor(self, node: SetNode) -> Optional[SetNode]:
        """Return the set node preceding ``node`` in order, or None if it is the first."""
        owner = node.owner
        index = owner._value_index(node)
        if not owner.is_leaf:
            return _subtree_max(owner.children[index])
        if index > 0:
            return owner.values[index - 1]
        current = owner
        while current.parent is not None:
            parent = current.parent
            child_index = parent._child_index(current)
            if child_index > 0:
                return parent.values[child_index - 1]
            current = parent
        return None

    def values(self) -> Iterator[Any]:
        """Yield the stored values in ascending order."""

        def walk(node: Optional[BTreeNode]) -> Iterator[Any]:
            if node is None:
                return
            if node.is_leaf:
                for set_node in node.values:
                    yield set_node.value
                return
            for child, set_node in zip(node.children, node.values):
                yield from walk(child)
                yield set_node.value
            yield from walk(node.children[-1])

        yield from walk(self.root)

    # -- insertion ---------------------------------------------------------

    def insert(self, value: Any) -> tuple[bool, Any]:
        """Add ``value``, or replace an equivalent one.

        Returns ``(True, None)`` when a value was added and ``(False, old)``
        when the equivalent value ``old`` was replaced.
        """
        if self.root is None:
            self.root = BTreeNode()
            self.root._insert_value(0, SetNode(value))
            return True, None

        node, index = self._locate(value)
        if index is not None:
            set_node = node.values[index]
            old = set_node.value
            set_node.value = value
            return False, old

        position = next(
            (i for i, sn in enumerate(node.values) if self.compare(value, sn.value) <= 0),
            len(node.values),
        )
        node._insert_value(position, SetNode(value))
        if len(node.values) > MAX_VALUES:
            self._split(node)

        while self.root.parent is not None:
            self.root = self.root.parent
        return True, None

    def _split(self, node: BTreeNode) -> None:
        half = len(node.values) // 2
        right = BTreeNode(node.parent)

        for child in node.children[half + 1:]:
            right._insert_child(len(right.children), child)
        for set_node in node.values[half + 1:]:
            right._insert_value(len(right.values), set_node)
        median = node.values[half]
        del node.values[half:]
        del node.children[half + 1:]

        parent = node.parent
        if parent is None:
            new_root = BTreeNode()
            new_root._insert_value(0, median)
            new_root._insert_child(0, node)
            new_root._insert_child(1, right)
            return

        index = parent._child_index(node)
        parent._insert_child(index + 1, right)
        parent._insert_value(index, median)
        if len(parent.values) > MAX_VALUES:
            self._split(parent)

    # -- removal -----------------------------------------------------------

    def remove(self, value: Any) -> tuple[bool, Any]:
        """Remove the value equivalent to ``value``.

        Returns ``(True, old)`` with the removed value, or ``(False, None)``
        when nothing equivalent was stored.
        """
        node, index = self._locate(value)
        if node is None or index is None:
            return False, None

        old = node.values[index].value
        if node.is_leaf:
            del node.values[index]
            self._repair_underflow(node)
        else:
            replacement = _subtree_max(node.children[index])
            leaf = replacement.owner
            leaf.values.pop()
            replacement.owner = node
            node.values[index] = replacement
            self._repair_underflow(leaf)

        root = self.root
        if not root.values:
            first_child = root.children[0] if root.children else None
            if first_child is not None:
                first_child.parent = None
            self.root = first_child
        return True, old

    def _repair_underflow(self, node: Optional[BTreeNode]) -> None:
        if node is None or len(node.values) >= MIN_VALUES or node.parent is None:
            return
        parent = node.parent
        child_index = parent._child_index(node)
        left = parent.children[child_index - 1] if child_index > 0 else None
        right = parent.children[child_index + 1] if child_index + 1 < len(parent.children) else None

        if right is not None and len(right.values) > MIN_VALUES:
            self._borrow_from_right(node, right, child_index)
        elif left is not None and len(left.values) > MIN_VALUES:
            self._borrow_from_left(node, left, child_index - 1)
        elif left is not None:
            self._merge(left, node, child_index - 1)
        else:
            self._merge(node, right, child_index)

    @staticmethod
    def _borrow_from_left(node: BTreeNode, left: BTreeNode, sep: int) -> None:
        parent = node.parent
        node._insert_value(0, parent.values[sep])
        moved = left.values.pop()
        moved.owner = parent
        parent.values[sep] = moved
        if not node.is_leaf:
            node._insert_child(0, left.children.pop())

    @staticmethod
    def _borrow_from_right(node: BTreeNode, right: BTreeNode, sep: int) -> None:
        parent = node.parent
        node._insert_value(len(node.values), parent.values[sep])
        moved = right.values.pop(0)
        moved.owner = parent
        parent.values[sep] = moved
        if not node.is_leaf:
            node._insert_child(len(node.children), right.children.pop(0))

    def _merge(self, left: BTreeNode, right: BTreeNode, sep: int) -> None:
        parent = left.parent
        left._insert_value(len(left.values), parent.values[sep])
        for child in right.children:
            left._insert_child(len(left.children), child)
        for set_node in right.values:
            left._insert_value(len(left.values), set_node)
        del parent.values[sep]
        del parent.children[sep + 1]
        self._repair_underflow(parent)

    # -- validation --------------------------------------------------------

    def is_proper(self) -> bool:
        """Check every B-tree invariant: sizes, order, equal depth and links."""
        if self.root is None:
            return True
        if self.root.parent is not None:
            return False
        return self._check(self.root, None, None) is not None

    def _check(self, node: BTreeNode, low: Optional[SetNode], high: Optional[SetNode]) -> Optional[int]:
        """Return the height of a valid subtree, or None if it breaks an invariant."""
        compare = self.compare
        count = len(node.values)
        if count > MAX_VALUES or count == 0:
            return None
        if node.parent is not None and count < MIN_VALUES:
            return None
        if any(sn.owner is not node for sn in node.values):
            return None
        if any(compare(a.value, b.value) >= 0 for a, b in zip(node.values, node.values[1:])):
            return None
        if low is not None and compare(node.values[0].value, low.value) <= 0:
            return None
        if high is not None and compare(node.values[-1].value, high.value) >= 0:
            return None
        if node.is_leaf:
            return 1
        if len(node.children) != count + 1:
            return None
        if any(child.parent is not node for child in node.children):
            return None

        bounds = [low, *node.values, high]
        heights = {
            self._check(child, bounds[i], bounds[i + 1])
            for i, child in enumerate(node.children)
        }
        if len(heights) != 1 or None in heights:
            return None
        return heights.pop() + 1