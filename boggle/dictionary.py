from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Protocol

logger = logging.getLogger("boggle")


class DictionaryOracle(Protocol):
    """Word and prefix membership, both case-insensitive."""

    def contains_word(self, word: str) -> bool: ...

    def contains_prefix(self, prefix: str) -> bool: ...


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()
        self._word_count = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        trie = cls()
        for w in words:
            trie.insert(w)
        return trie

    def insert(self, word: str):
        node = self.root
        for ch in word.upper():
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s.upper():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def contains_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def __contains__(self, word: str) -> bool:
        return self.contains_word(word)

    def __len__(self) -> int:
        return self._word_count


def load_trie(path: str | Path, min_length: int = 4) -> Trie:
    """Build a trie from a word list with one word per line.

    Words shorter than `min_length` or containing non-letters are skipped.
    """
    trie = Trie()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if len(word) >= min_length and word.isascii() and word.isalpha():
                trie.insert(word)
    logger.info("Loaded %d words from %s", len(trie), path)
    return trie
