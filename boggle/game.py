"""One round of Boggle: a human turn followed by the computer's sweep.

Both turns share a single SeenWords, so a word the human claims is never
reported again by the computer, and the computer never reports a word twice.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from boggle.board import Board, Cell
from boggle.dictionary import DictionaryOracle
from boggle.metrics import TurnTimer
from boggle.solver import MIN_WORD_LENGTH, Discovery, SeenWords, find_all_words, find_path

logger = logging.getLogger("boggle")


def score(word: str) -> int:
    """Points for an accepted word: one for four letters, one more per extra letter."""
    if len(word) < MIN_WORD_LENGTH:
        return 0
    return len(word) - (MIN_WORD_LENGTH - 1)


class Rejection(Enum):
    TOO_SHORT = "too short"
    ALREADY_SEEN = "already found"
    NOT_A_WORD = "not in dictionary"
    NOT_ON_BOARD = "cannot be traced on the board"


@dataclass(frozen=True)
class WordCheck:
    word: str
    reason: Rejection | None = None
    path: tuple[Cell, ...] = ()

    @property
    def accepted(self) -> bool:
        return self.reason is None


@dataclass
class GameRound:
    board: Board
    dictionary: DictionaryOracle
    seen: SeenWords = field(default_factory=SeenWords)
    human_words: list[str] = field(default_factory=list)
    computer_words: list[Discovery] = field(default_factory=list)
    timer: TurnTimer = field(default_factory=TurnTimer)

    def check_word(self, word: str) -> WordCheck:
        """Apply the acceptance rules in order without changing the round."""
        word = word.strip().upper()
        if len(word) < MIN_WORD_LENGTH:
            return WordCheck(word, Rejection.TOO_SHORT)
        if word in self.seen:
            return WordCheck(word, Rejection.ALREADY_SEEN)
        if not self.dictionary.contains_word(word):
            return WordCheck(word, Rejection.NOT_A_WORD)
        path = find_path(word, self.board)
        if path is None:
            return WordCheck(word, Rejection.NOT_ON_BOARD)
        return WordCheck(word, path=tuple(path))

    def submit_word(self, word: str) -> WordCheck:
        with self.timer.turn("human"):
            result = self.check_word(word)
            if result.accepted:
                self.seen.add(result.word)
                self.human_words.append(result.word)
                logger.info("Human found %s (+%d)", result.word, score(result.word))
            else:
                logger.debug("Rejected %r: %s", result.word, result.reason.value)
        return result

    def computer_turn(self) -> list[Discovery]:
        with self.timer.turn("computer"):
            found = find_all_words(self.board, self.dictionary, self.seen)
        self.computer_words.extend(found)
        logger.info(
            "Board %s: computer found %d words in %.1fms",
            self.board, len(found), self.timer.timings["computer"],
        )
        return found

    @property
    def human_score(self) -> int:
        return sum(score(w) for w in self.human_words)

    @property
    def computer_score(self) -> int:
        return sum(score(d.word) for d in self.computer_words)
