"""Tests for move, setup-stone and board-size extraction."""

import pytest

from go_kifu.core.board import BLACK, WHITE, Move, Stone
from go_kifu.sgf.moves import board_size, extract_moves, extract_setup, last_move_color
from go_kifu.sgf.parser import parse
from go_kifu.sgf.tree import reduce_to_main_line


def _line(text: str):
    return reduce_to_main_line(parse(text))


class TestExtractMoves:
    def test_order_and_colors(self) -> None:
        moves = extract_moves(_line("(;SZ[19];B[pd];W[dp];B[qq])"))
        assert moves == [Move(BLACK, 15, 3), Move(WHITE, 3, 15), Move(BLACK, 16, 16)]

    def test_passes_skipped(self) -> None:
        moves = extract_moves(_line("(;B[pd];W[];B[tt];W[dp])"))
        assert moves == [Move(BLACK, 15, 3), Move(WHITE, 3, 15)]

    def test_malformed_skipped(self) -> None:
        moves = extract_moves(_line("(;B[zz];W[a];B[aa])"))
        assert moves == [Move(BLACK, 0, 0)]

    def test_black_before_white_on_one_node(self) -> None:
        moves = extract_moves(_line("(;W[bb]B[aa])"))
        assert moves == [Move(BLACK, 0, 0), Move(WHITE, 1, 1)]

    def test_setup_not_treated_as_moves(self) -> None:
        assert extract_moves(_line("(;AB[aa][bb]AW[cc])")) == []

    def test_variations_ignored(self) -> None:
        moves = extract_moves(_line("(;B[aa](;W[bb])(;W[cc]))"))
        assert moves == [Move(BLACK, 0, 0), Move(WHITE, 1, 1)]

    def test_accepts_node_list(self) -> None:
        assert extract_moves(parse("(;B[aa])").main_line()) == [Move(BLACK, 0, 0)]

    def test_small_board_bounds(self) -> None:
        assert extract_moves(_line("(;SZ[9];B[jj];W[ii])"), 9) == [Move(WHITE, 8, 8)]

    def test_empty(self) -> None:
        assert extract_moves(_line("")) == []


class TestExtractSetup:
    def test_ab_then_aw_per_node(self) -> None:
        stones = extract_setup(_line("(;AW[cc]AB[aa][bb];AB[dd])"))
        assert stones == [
            Stone(0, 0, BLACK), Stone(1, 1, BLACK), Stone(2, 2, WHITE), Stone(3, 3, BLACK),
        ]

    def test_compressed_rectangle(self) -> None:
        stones = extract_setup(_line("(;AB[aa:bb])"))
        assert [(s.x, s.y) for s in stones] == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_malformed_skipped(self) -> None:
        stones = extract_setup(_line("(;AB[zz][aa][a:b])"))
        assert stones == [Stone(0, 0, BLACK)]


class TestBoardSize:
    @pytest.mark.parametrize("text,size", [
        ("(;SZ[9])", 9),
        ("(;SZ[13];B[aa])", 13),
        ("(;SZ[19])", 19),
        ("(;B[aa])", 19),
        ("(;SZ[19:13])", 19),
        ("(;SZ[abc])", 19),
        ("(;SZ[25])", 19),
        ("(;SZ[1])", 19),
        ("", 19),
    ])
    def test_sizes(self, text: str, size: int) -> None:
        assert board_size(_line(text)) == size

    def test_custom_default(self) -> None:
        assert board_size(_line("(;B[aa])"), default=9) == 9


class TestLastMoveColor:
    def test_white_preferred(self) -> None:
        assert last_move_color(_line("(;B[aa]W[bb])")) == WHITE

    def test_black(self) -> None:
        assert last_move_color(_line("(;W[aa];B[bb])")) == BLACK

    def test_none(self) -> None:
        assert last_move_color(_line("(;AB[aa])")) is None
        assert last_move_color(_line("")) is None
