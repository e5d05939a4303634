"""Abstract data types: B-tree, ordered set, ordered map, vector and recursive tree."""

__version__ = "0.1.0"
__all__ = ["btree", "btree_set", "ordered_map", "vector", "rectree"]