import itertools

import numpy as np
import pytest
from boggle.board import BIG_BOGGLE_CUBES, STANDARD_CUBES, Board, BoardConfigError, BoardSize, Cell


def test_adjacency_matches_king_moves():
    board = Board.from_config("ABCDEFGHIJKLMNOP")
    for a, b in itertools.product(board.cells(), repeat=2):
        expected = a != b and max(abs(a.row - b.row), abs(a.col - b.col)) == 1
        assert board.adjacent(a, b) is expected


def test_adjacency_symmetric():
    board = Board.from_config("ABCDEFGHIJKLMNOPQRSTUVWXY", BoardSize.BIG)
    for a, b in itertools.product(board.cells(), repeat=2):
        assert board.adjacent(a, b) == board.adjacent(b, a)


def test_cell_not_adjacent_to_itself():
    assert not Board.adjacent(Cell(1, 1), Cell(1, 1))


def test_no_predecessor_adjacent_to_everything():
    board = Board([["A", "B"], ["C", "D"]])
    assert all(board.adjacent(None, c) for c in board.cells())


def test_neighbors_row_major():
    board = Board.from_config("ABCDEFGHIJKLMNOP")
    assert board.neighbors(Cell(0, 0)) == [Cell(0, 1), Cell(1, 0), Cell(1, 1)]
    assert len(board.neighbors(Cell(1, 1))) == 8
    assert len(board.neighbors(Cell(3, 2))) == 5


def test_single_cell_board_has_no_neighbors():
    board = Board(["Q"])
    assert board.dimensions() == (1, 1)
    assert board.neighbors(Cell(0, 0)) == []


def test_letter_at_and_dimensions():
    board = Board(["STA", "RES"])
    assert board.dimensions() == (2, 3)
    assert board.letter_at(Cell(0, 0)) == "S"
    assert board.letter_at(Cell(1, 2)) == "S"
    assert list(board.cells())[:4] == [Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(1, 0)]


def test_from_config_uppercases_and_truncates():
    board = Board.from_config("abcdefghijklmnopqrstuvwxyz")
    assert board.rows() == ["ABCD", "EFGH", "IJKL", "MNOP"]


def test_from_config_too_short():
    with pytest.raises(BoardConfigError):
        Board.from_config("ABCDEFGHIJKLMNO")
    with pytest.raises(BoardConfigError):
        Board.from_config("ABCDEFGHIJKLMNOP", BoardSize.BIG)


def test_from_config_rejects_non_letters():
    with pytest.raises(BoardConfigError):
        Board.from_config("ABCD EFGH IJKL MNOP")


def test_invalid_rows():
    with pytest.raises(BoardConfigError):
        Board([])
    with pytest.raises(BoardConfigError):
        Board(["AB", "C"])
    with pytest.raises(BoardConfigError):
        Board(["ab", "cd"])


def test_roll_is_reproducible_with_seed():
    b1 = Board.roll(BoardSize.STANDARD, np.random.default_rng(42))
    b2 = Board.roll(BoardSize.STANDARD, np.random.default_rng(42))
    assert b1 == b2
    assert b1.dimensions() == (4, 4)


def test_roll_uses_die_faces():
    board = Board.roll(BoardSize.BIG, np.random.default_rng(3))
    assert board.dimensions() == (5, 5)
    faces = set("".join(BIG_BOGGLE_CUBES))
    assert all(board.letter_at(c) in faces for c in board.cells())


def test_die_tables_match_sizes():
    assert len(STANDARD_CUBES) == 16
    assert len(BIG_BOGGLE_CUBES) == 25
    assert all(len(cube) == 6 for cube in STANDARD_CUBES + BIG_BOGGLE_CUBES)
    assert BoardSize.STANDARD.cubes is STANDARD_CUBES


def test_str_for_logging():
    assert str(Board(["ST", "AR"])) == "S T / A R"
