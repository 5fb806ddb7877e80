"""Tests for Board capture/liberty logic."""

import numpy as np
import pytest

from go_kifu.core.board import BLACK, EMPTY, WHITE, Board, Stone, opponent


class TestBasics:
    def test_fresh_board_is_empty(self) -> None:
        board = Board()
        assert board.grid.shape == (19, 19)
        assert board.grid.dtype == np.int8
        assert board.stones_count(BLACK) == board.stones_count(WHITE) == 0

    def test_grid_is_row_major(self) -> None:
        board = Board()
        board.place(3, 5, BLACK)
        assert board.grid[5, 3] == BLACK
        assert board.at(3, 5) == BLACK
        assert board.get((3, 5)) == BLACK

    def test_place_off_board(self) -> None:
        with pytest.raises(ValueError):
            Board().place(19, 0, BLACK)

    def test_neighbors_in_corner(self) -> None:
        assert sorted(Board().neighbors((0, 0))) == [(0, 1), (1, 0)]

    def test_opponent(self) -> None:
        assert opponent(BLACK) == WHITE
        assert opponent(WHITE) == BLACK

    def test_copy_is_independent(self) -> None:
        board = Board()
        board.place(0, 0, BLACK)
        clone = board.copy()
        clone.place(1, 1, WHITE)
        assert board.at(1, 1) == EMPTY
        assert clone.at(0, 0) == BLACK

    def test_stones_listing(self) -> None:
        board = Board(5)
        board.place(2, 1, WHITE)
        board.place(0, 4, BLACK)
        assert board.stones() == [Stone(0, 4, BLACK), Stone(2, 1, WHITE)]


class TestGroups:
    def test_collect_group_and_liberties(self) -> None:
        board = Board()
        for x in (4, 5, 6):
            board.place(x, 9, BLACK)
        group, libs = board.collect_group((5, 9))
        assert group == {(4, 9), (5, 9), (6, 9)}
        assert len(libs) == 8

    def test_has_liberty(self) -> None:
        board = Board()
        board.place(0, 0, BLACK)
        assert board.has_liberty((0, 0))
        board.place(1, 0, WHITE)
        board.place(0, 1, WHITE)
        assert not board.has_liberty((0, 0))

    def test_collect_group_on_empty_point(self) -> None:
        with pytest.raises(ValueError):
            Board().collect_group((3, 3))


class TestPlay:
    def test_corner_capture(self) -> None:
        board = Board()
        board.place(0, 0, BLACK)
        assert board.play(WHITE, (1, 0)) == 0
        assert board.play(WHITE, (0, 1)) == 1
        assert board.at(0, 0) == EMPTY
        assert board.at(1, 0) == WHITE and board.at(0, 1) == WHITE

    def test_two_stone_group_capture(self) -> None:
        board = Board()
        board.place(0, 0, BLACK)
        board.place(1, 0, BLACK)
        board.play(WHITE, (0, 1))
        board.play(WHITE, (1, 1))
        assert board.play(WHITE, (2, 0)) == 2
        assert board.stones_count(BLACK) == 0

    def test_suicide_vanishes(self) -> None:
        board = Board()
        board.place(1, 0, WHITE)
        board.place(0, 1, WHITE)
        assert board.play(BLACK, (0, 0)) == 0
        assert board.at(0, 0) == EMPTY
        assert board.stones_count(WHITE) == 2

    def test_multi_stone_suicide_vanishes(self) -> None:
        board = Board()
        board.place(0, 0, BLACK)
        for p in ((2, 0), (0, 1), (1, 1)):
            board.place(p[0], p[1], WHITE)
        board.play(BLACK, (1, 0))
        assert board.stones_count(BLACK) == 0

    def test_capture_takes_precedence_over_suicide(self) -> None:
        board = Board()
        board.place(1, 0, WHITE)
        board.place(0, 1, WHITE)
        board.place(2, 0, BLACK)
        board.place(1, 1, BLACK)
        assert board.play(BLACK, (0, 0)) == 1
        assert board.at(0, 0) == BLACK
        assert board.at(1, 0) == EMPTY
        assert board.at(0, 1) == WHITE

    def test_no_ko_enforcement(self) -> None:
        board = Board()
        # 劫形：黑 (1,0),(0,1),(2,1),(1,2)；白 (2,0),(3,1),(2,2)
        for p in ((1, 0), (0, 1), (2, 1), (1, 2)):
            board.place(p[0], p[1], BLACK)
        for p in ((2, 0), (3, 1), (2, 2)):
            board.place(p[0], p[1], WHITE)
        assert board.play(WHITE, (1, 1)) == 1   # 提 (2,1)
        assert board.play(BLACK, (2, 1)) == 1   # 立即提回，不判劫
        assert board.at(1, 1) == EMPTY

    def test_play_off_board(self) -> None:
        with pytest.raises(ValueError):
            Board().play(BLACK, (-1, 0))

    def test_equality(self) -> None:
        a, b = Board(), Board()
        a.play(BLACK, (3, 3))
        b.place(3, 3, BLACK)
        assert a == b
        assert a != Board(9)
