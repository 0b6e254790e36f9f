"""Sorting and searching algorithms, linked lists, trees, a trie and graph searches."""

__version__ = "0.1.0"