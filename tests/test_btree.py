import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from adtkit.btree import MAX_VALUES, MIN_VALUES, BTree, BTreeNode, SetNode


def compare_ints(a, b):
    return a - b


def compare_first(a, b):
    return (a[0] > b[0]) - (a[0] < b[0])


def build(values):
    tree = BTree(compare_ints)
    for v in values:
        tree.insert(v)
    return tree


def forward(tree):
    out = []
    node = tree.min_node()
    while node is not None:
        out.append(node.value)
        node = tree.successor(node)
    return out


def backward(tree):
    out = []
    node = tree.max_node()
    while node is not None:
        out.append(node.value)
        node = tree.predecessor(node)
    return out


def collect_nodes(node):
    yield node
    for child in node.children:
        yield from collect_nodes(child)


def test_empty_tree():
    tree = BTree(compare_ints)
    assert tree.min_node() is None
    assert tree.max_node() is None
    assert tree.find_node(3) is None
    assert list(tree.values()) == []
    assert tree.is_proper()
    assert tree.remove(3) == (False, None)


def test_compare_required():
    with pytest.raises(TypeError):
        BTree(None)


def test_insert_returns_added_flag():
    tree = BTree(compare_ints)
    assert tree.insert(5) == (True, None)
    assert tree.insert(7) == (True, None)
    assert list(tree.values()) == [5, 7]


def test_insert_replaces_equivalent_value():
    tree = BTree(compare_first)
    tree.insert((1, "a"))
    tree.insert((2, "b"))
    added, old = tree.insert((1, "z"))
    assert added is False
    assert old == (1, "a")
    assert list(tree.values()) == [(1, "z"), (2, "b")]
    assert tree.find_node((1, None)).value == (1, "z")


def test_ascending_inserts_stay_proper():
    tree = BTree(compare_ints)
    for i in range(1000):
        tree.insert(i)
        assert tree.max_node().value == i
    assert tree.is_proper()
    assert list(tree.values()) == list(range(1000))


def test_split_creates_new_root():
    tree = build(range(MAX_VALUES + 1))
    assert not tree.root.is_leaf
    assert len(tree.root.values) == 1
    assert tree.root.parent is None
    assert tree.is_proper()


def test_random_inserts_sorted_and_proper():
    rng = random.Random(1)
    values = list(range(500))
    rng.shuffle(values)
    tree = BTree(compare_ints)
    for v in values:
        tree.insert(v)
        assert tree.is_proper()
    assert list(tree.values()) == sorted(values)


def test_find_node_and_owner():
    tree = build([10, 20, 30, 40, 50, 60, 70])
    node = tree.find_node(40)
    assert isinstance(node, SetNode)
    assert node.value == 40
    assert any(sn is node for sn in node.owner.values)
    assert tree.find_node(45) is None


def test_successor_and_predecessor_traversal():
    rng = random.Random(7)
    values = rng.sample(range(10_000), 300)
    tree = build(values)
    assert forward(tree) == sorted(values)
    assert backward(tree) == sorted(values, reverse=True)


def test_remove_missing_leaves_tree_unchanged():
    tree = build(range(20))
    assert tree.remove(100) == (False, None)
    assert list(tree.values()) == list(range(20))
    assert tree.is_proper()


def test_remove_returns_old_value():
    tree = BTree(compare_first)
    tree.insert((3, "x"))
    assert tree.remove((3, None)) == (True, (3, "x"))
    assert tree.root is None


def test_random_removals_stay_proper():
    rng = random.Random(3)
    values = list(range(400))
    rng.shuffle(values)
    tree = build(values)
    remaining = set(values)
    order = values[:]
    rng.shuffle(order)
    for v in order:
        removed, old = tree.remove(v)
        assert removed and old == v
        remaining.discard(v)
        assert tree.is_proper()
        assert list(tree.values()) == sorted(remaining)
    assert tree.root is None


def test_remove_inner_separator():
    tree = build(range(50))
    separator = tree.root.values[0].value
    assert tree.remove(separator) == (True, separator)
    assert tree.find_node(separator) is None
    assert tree.is_proper()
    assert forward(tree) == [v for v in range(50) if v != separator]


def test_node_sizes_within_limits():
    tree = build(range(300))
    nodes = list(collect_nodes(tree.root))
    non_root_sizes = [len(node.values) for node in nodes if node.parent is not None]
    assert len(non_root_sizes) == len(nodes) - 1
    assert non_root_sizes
    assert all(MIN_VALUES <= size <= MAX_VALUES for size in non_root_sizes)
    assert sum(len(node.values) for node in nodes) == 300


def test_is_proper_detects_bad_order():
    tree = build(range(3))
    tree.root.values.reverse()
    assert tree.is_proper() is False


def test_is_proper_detects_bad_parent_link():
    tree = build(range(30))
    tree.root.children[0].parent = BTreeNode()
    assert tree.is_proper() is False


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(-1000, 1000)), st.lists(st.integers(-1000, 1000)))
def test_matches_builtin_set(inserts, removals):
    tree = build(inserts)
    model = set(inserts)
    for v in removals:
        removed, _ = tree.remove(v)
        assert removed == (v in model)
        model.discard(v)
    assert tree.is_proper()
    assert list(tree.values()) == sorted(model)
    assert forward(tree) == sorted(model)
    assert backward(tree) == sorted(model, reverse=True)