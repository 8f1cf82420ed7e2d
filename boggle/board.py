from __future__ import annotations

from enum import Enum
from typing import Iterator, NamedTuple, Sequence

import numpy as np


class BoardConfigError(ValueError):
    """Raised when user-supplied letters cannot fill a board."""


class Cell(NamedTuple):
    row: int
    col: int


STANDARD_CUBES = (
    "AAEEGN", "ABBJOO", "ACHOPS", "AFFKPS", "AOOTTW", "CIMOTU", "DEILRX", "DELRVY",
    "DISTTY", "EEGHNW", "EEINSU", "EHRTVW", "EIOSST", "ELRTTY", "HIMNQU", "HLNNRZ",
)

BIG_BOGGLE_CUBES = (
    "AAAFRS", "AAEEEE", "AAFIRS", "ADENNN", "AEEEEM", "AEEGMU", "AEGMNN", "AFIRSY",
    "BJKQXZ", "CCNSTW", "CEIILT", "CEILPT", "CEIPST", "DDLNOR", "DDHNOT", "DHHLOR",
    "DHLNOR", "EIIITT", "EMOTTT", "ENSSSU", "FIPRSY", "GORRVW", "HIPRRY", "NOOTUW", "OOOTTU",
)


class BoardSize(Enum):
    STANDARD = 4
    BIG = 5

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.value, self.value

    @property
    def cubes(self) -> tuple[str, ...]:
        return STANDARD_CUBES if self is BoardSize.STANDARD else BIG_BOGGLE_CUBES


class Board:
    """Immutable letter grid with king-move adjacency."""

    __slots__ = ("_rows", "_n_rows", "_n_cols")

    def __init__(self, rows: Sequence[Sequence[str]]):
        if not rows or not rows[0]:
            raise BoardConfigError("Board needs at least one row and one column")
        n_cols = len(rows[0])
        grid = []
        for r, row in enumerate(rows):
            if len(row) != n_cols:
                raise BoardConfigError(f"Row {r} has {len(row)} letters, expected {n_cols}")
            for letter in row:
                if len(letter) != 1 or not ("A" <= letter <= "Z"):
                    raise BoardConfigError(f"Invalid tile {letter!r} in row {r}")
            grid.append(tuple(row))
        self._rows: tuple[tuple[str, ...], ...] = tuple(grid)
        self._n_rows = len(grid)
        self._n_cols = n_cols

    @classmethod
    def from_config(cls, text: str, size: BoardSize = BoardSize.STANDARD) -> Board:
        """Fill the board row-major from the first R*C characters of `text`."""
        n_rows, n_cols = size.dimensions
        needed = n_rows * n_cols
        config = text.upper()
        if len(config) < needed:
            raise BoardConfigError(f"Need {needed} letters, got {len(config)}")
        config = config[:needed]
        for ch in config:
            if not ("A" <= ch <= "Z"):
                raise BoardConfigError(f"Invalid letter {ch!r} in board configuration")
        return cls([config[r * n_cols:(r + 1) * n_cols] for r in range(n_rows)])

    @classmethod
    def roll(cls, size: BoardSize = BoardSize.STANDARD, rng: np.random.Generator | None = None) -> Board:
        """Roll one face of every die, then shuffle the dice across the board."""
        if rng is None:
            rng = np.random.default_rng()
        n_rows, n_cols = size.dimensions
        cubes = size.cubes
        if len(cubes) != n_rows * n_cols:
            raise ValueError(f"{size.name} has {len(cubes)} dice for {n_rows * n_cols} positions")

        faces = rng.integers(0, 6, size=len(cubes))
        letters = [cube[face] for cube, face in zip(cubes, faces)]
        order = rng.permutation(len(letters))
        shuffled = [letters[i] for i in order]
        return cls([shuffled[r * n_cols:(r + 1) * n_cols] for r in range(n_rows)])

    def dimensions(self) -> tuple[int, int]:
        return self._n_rows, self._n_cols

    def letter_at(self, cell: Cell) -> str:
        return self._rows[cell.row][cell.col]

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.row < self._n_rows and 0 <= cell.col < self._n_cols

    def cells(self) -> Iterator[Cell]:
        for r in range(self._n_rows):
            for c in range(self._n_cols):
                yield Cell(r, c)

    @staticmethod
    def adjacent(a: Cell | None, b: Cell) -> bool:
        """King-move adjacency. `None` stands for "no previous cell" and touches everything."""
        if a is None:
            return True
        return max(abs(a.row - b.row), abs(a.col - b.col)) == 1

    def neighbors(self, cell: Cell) -> list[Cell]:
        """In-bounds cells adjacent to `cell`, row-major."""
        out = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                n = Cell(cell.row + dr, cell.col + dc)
                if self.contains(n):
                    out.append(n)
        return out

    def rows(self) -> list[str]:
        return ["".join(row) for row in self._rows]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __str__(self):
        return " / ".join(" ".join(row) for row in self._rows)

    def __repr__(self):
        return f"Board({self.rows()!r})"
