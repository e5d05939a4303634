# adtkit

Classic abstract data types whose ordering comes from a three-way
comparison function. They accept optional destroy callbacks, which are
called with each element that is removed, replaced or cleared.

| Module | Contents |
| --- | --- |
| `adtkit.btree` | `BTree`, a (3,5) B-tree, with its `BTreeNode` and `SetNode` |
| `adtkit.btree_set` | `BTreeSet`, an ordered set of unique values built on `BTree` |
| `adtkit.ordered_map` | `OrderedMap` and `MapNode`, a key/value map built on `BTreeSet` |
| `adtkit.vector` | `Vector` and `VectorNode`, a growable array with node traversal |
| `adtkit.rectree` | `RecTree` and `tree_size`, binary trees that record their size |

## Installation

```
pip install .
```

## Comparators

A comparator takes `(a, b)`. It returns a negative number when `a < b`,
zero when the two are equivalent and a positive number when `a > b`.

```python
def compare(a, b):
    return (a > b) - (a < b)
```

## BTreeSet

```python
from adtkit.btree_set import BTreeSet

s = BTreeSet(compare, None)
for n in (5, 1, 3):
    s.insert(n)

assert list(s) == [1, 3, 5]
assert 3 in s and len(s) == 3
assert s.find(3) == 3

node = s.first()
assert s.next(node).value == 3
assert s.previous(s.last()).value == 3

assert s.remove(1) is True
assert s.remove(42) is False
assert s.is_proper()
```

- `insert` replaces an equivalent value if there is one. The old value is
  then passed to the destroy callback.
- `find` returns the stored value, and `find_node` returns its node. Both
  return `None` when there is no match.
- `first`, `last`, `next` and `previous` return nodes, or `None` at either end.
- `set_destroy_value` swaps the callback and returns the previous one.
- `clear` empties the set.
- `is_proper` checks the B-tree invariants: node sizes, ordering, equal leaf
  depth and parent links.

`BTree` can also be used on its own. Its `insert` returns `(True, None)` for a
new value and `(False, old)` for a replaced one. Its `remove` returns
`(True, old)` or `(False, None)`.

## OrderedMap

```python
from adtkit.ordered_map import OrderedMap

m = OrderedMap(compare, None, None)
m.insert("b", 2)
m.insert("a", 1)

assert m.find("a") == 1
assert m.find("z") is None
assert list(m) == ["a", "b"]
assert list(m.items()) == [("a", 1), ("b", 2)]

node = m.first()
assert (node.key, node.value) == ("a", 1)
assert m.next(node).key == "b"
```

- Inserting an existing key replaces both the key and the value. Each
  replaced object that differs from its replacement is passed to
  `destroy_key` or `destroy_value`.
- `remove` returns whether the key was present.
- `next` raises `KeyError` when it is given a node whose key is not in the map.
- `set_destroy_key` and `set_destroy_value` each return the previous callback.

## Vector

```python
from adtkit.vector import Vector

v = Vector(2, None)          # two elements, both None
v.append("x")
v[0] = "w"
assert list(v) == ["w", None, "x"]

assert v.find("x", compare) == "x"
node = v.find_node("x", compare)
assert v.previous(node).value is None

v.remove_last()
assert len(v) == 2
```

- Positions outside `0 <= pos < len(v)` raise `IndexError`.
- Calling `remove_last` on an empty vector also raises `IndexError`.
- When an element is overwritten by a different object, or removed, it is
  passed to the destroy callback.
- Traversal uses `first`, `last`, `next` and `previous`, which return
  `VectorNode` objects, or `None` past either end.

## RecTree

```python
from adtkit.rectree import RecTree, tree_size

root = RecTree(5, RecTree(3, None, None), RecTree(1, None, None))
assert len(root) == 3
assert root.left.value == 3
assert tree_size(None) == 0
assert len(RecTree(None, None, None)) == 0
```

The empty tree is `None`. A tree's size is computed once, when the tree is
created. A tree whose root value is `None` holds no elements.

## Scope

`adtkit` is a library only. It has no command-line tool. It does not store
anything on disk: every structure exists in memory only.

## Running the tests

```
pip install .[test]
pytest
```