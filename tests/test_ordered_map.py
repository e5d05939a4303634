import pytest
from hypothesis import given
from hypothesis import strategies as st

from adtkit.ordered_map import MapNode, OrderedMap


def compare_ints(a, b):
    return a - b


def test_insert_and_find():
    m = OrderedMap(compare_ints)
    for k in range(50):
        m.insert(k, str(k))
        assert len(m) == k + 1
    for k in range(50):
        assert m.find(k) == str(k)
    assert m.find(100) is None
    assert 10 in m
    assert 100 not in m


def test_requires_compare():
    with pytest.raises(TypeError):
        OrderedMap(None)


def test_replace_calls_destroy_for_old_key_and_value():
    keys, values = [], []
    m = OrderedMap(compare_ints, keys.append, values.append)
    old_key, new_key = 1000, 1000 * 1
    old_key = int("1000")
    m.insert(old_key, "a")
    new_key = int("1000")
    m.insert(new_key, "b")
    assert len(m) == 1
    assert m.find(1000) == "b"
    assert m.find_node(1000).key is new_key
    assert keys == [old_key] and keys[0] is old_key
    assert values == ["a"]


def test_replace_same_objects_does_not_destroy():
    destroyed = []
    m = OrderedMap(compare_ints, destroyed.append, destroyed.append)
    value = object()
    m.insert(1, value)
    m.insert(1, value)
    assert destroyed == []
    assert m.find(1) is value


def test_remove_destroys_key_and_value():
    keys, values = [], []
    m = OrderedMap(compare_ints, keys.append, values.append)
    m.insert(3, "c")
    m.insert(4, "d")
    assert m.remove(3) is True
    assert m.remove(3) is False
    assert keys == [3]
    assert values == ["c"]
    assert len(m) == 1
    assert m.find(3) is None


def test_traversal_visits_all_in_order():
    m = OrderedMap(compare_ints)
    source = [7, 2, 9, 4, 1, 8]
    for k in source:
        m.insert(k, k * 10)
    seen = []
    node = m.first()
    while node is not None:
        seen.append((node.key, node.value))
        node = m.next(node)
    assert seen == list(m.items())
    assert [k for k, _ in seen] == sorted(source)
    assert list(m) == sorted(source)


def test_first_of_empty_is_none():
    assert OrderedMap(compare_ints).first() is None


def test_next_of_foreign_node_raises():
    m = OrderedMap(compare_ints)
    m.insert(1, "x")
    with pytest.raises(KeyError):
        m.next(MapNode(42))


def test_find_node_distinguishes_none_value():
    m = OrderedMap(compare_ints)
    m.insert(5, None)
    assert m.find(5) is None
    node = m.find_node(5)
    assert node.key == 5 and node.value is None
    assert m.find_node(6) is None


def test_set_destroy_returns_previous():
    m = OrderedMap(compare_ints, print, len)
    assert m.set_destroy_key(None) is print
    assert m.set_destroy_value(None) is len
    assert m.set_destroy_key(repr) is None


def test_clear_destroys_everything():
    keys, values = [], []
    m = OrderedMap(compare_ints, keys.append, values.append)
    for k in range(20):
        m.insert(k, -k)
    m.clear()
    assert len(m) == 0
    assert sorted(keys) == list(range(20))
    assert sorted(values) == sorted(-k for k in range(20))


@given(st.lists(st.tuples(st.integers(-50, 50), st.integers()), max_size=80),
       st.lists(st.integers(-50, 50), max_size=40))
def test_behaves_like_dict(pairs, removals):
    m = OrderedMap(compare_ints)
    expected = {}
    for k, v in pairs:
        m.insert(k, v)
        expected[k] = v
    for k in removals:
        assert m.remove(k) == (k in expected)
        expected.pop(k, None)
    assert len(m) == len(expected)
    assert list(m.items()) == sorted(expected.items())