"""Classic data structures and algorithms: binary trees, search trees, heaps, searching, hashing, graphs and lists."""

__version__ = "0.1.0"

__all__ = [
    "avl",
    "binary_tree",
    "bst",
    "graphs",
    "hashing",
    "heap",
    "lists",
    "search",
    "splay",
    "tree_problems",
]