"""A character trie answering prefix queries."""

from __future__ import annotations

from collections.abc import Iterable


class _TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.is_word = False


class Trie:
    """Words stored letter by letter; ``contains`` matches any stored prefix."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root: _TrieNode | None = None
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Store ``word``."""
        if self._root is None:
            self._root = _TrieNode()
        node = self._root
        for letter in word:
            node = node.children.setdefault(letter, _TrieNode())
        node.is_word = True

    def contains(self, word: str) -> bool:
        """Return whether ``word`` is a prefix of some stored word.

        An empty trie contains nothing, not even the empty string.
        """
        node = self._root
        if node is None:
            return False
        for letter in word:
            node = node.children.get(letter)
            if node is None:
                return False
        return True

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)