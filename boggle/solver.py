from __future__ import annotations

from typing import Iterator, NamedTuple

from boggle.board import Board, Cell
from boggle.dictionary import DictionaryOracle

MIN_WORD_LENGTH = 4


class SeenWords:
    """Words already reported this round.

    One instance is shared by the human turn and the computer turn. Both may
    add words; nothing is ever removed.
    """

    def __init__(self, words=()):
        self._words: set[str] = set()
        for w in words:
            self.add(w)

    def add(self, word: str):
        self._words.add(word.upper())

    def __contains__(self, word: str) -> bool:
        return word.upper() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self):
        return f"SeenWords({sorted(self._words)!r})"


class Discovery(NamedTuple):
    word: str
    path: tuple[Cell, ...]


def find_path(word: str, board: Board) -> list[Cell] | None:
    """Trace `word` over adjacent, non-repeating cells.

    Returns the first path found (candidates tried row-major, depth first),
    or None if the word cannot be traced.
    """
    if not word:
        raise ValueError("find_path requires a non-empty word")
    word = word.upper()
    path: list[Cell] = []
    used: set[Cell] = set()

    def trace(index: int, previous: Cell | None) -> bool:
        if index == len(word):
            return True
        candidates = board.cells() if previous is None else board.neighbors(previous)
        for cell in candidates:
            if cell in used or board.letter_at(cell) != word[index]:
                continue
            path.append(cell)
            used.add(cell)
            if trace(index + 1, cell):
                return True
            path.pop()
            used.discard(cell)
        return False

    return path if trace(0, None) else None


def find_all_words(
    board: Board,
    dictionary: DictionaryOracle,
    seen: SeenWords,
    min_length: int = MIN_WORD_LENGTH,
) -> list[Discovery]:
    """Find every dictionary word on the board that is not in `seen` yet.

    Each word found is added to `seen` as soon as it is discovered, so it is
    reported once even when several paths spell it. Results come back in
    discovery order: start cells row-major, then depth first.
    """
    found: list[Discovery] = []
    path: list[Cell] = []
    used: set[Cell] = set()
    letters: list[str] = []

    def dfs(cell: Cell):
        path.append(cell)
        used.add(cell)
        letters.append(board.letter_at(cell))
        so_far = "".join(letters)

        # prune: nothing in the dictionary starts with so_far
        if dictionary.contains_prefix(so_far):
            if len(so_far) >= min_length and so_far not in seen and dictionary.contains_word(so_far):
                seen.add(so_far)
                found.append(Discovery(so_far, tuple(path)))
            for nxt in board.neighbors(cell):
                if nxt not in used:
                    dfs(nxt)

        letters.pop()
        used.discard(cell)
        path.pop()

    for start in board.cells():
        dfs(start)

    return found
