"""go_kifu: 围棋棋谱引擎（SGF 解析、主线裁剪、提子回放、坐标换算、手番判定）。"""

from .errors import GoKifuError, SgfParseError, CoordinateError
from .core.board import Board, Move, Stone, Color, EMPTY, BLACK, WHITE, opponent
from .core.coords import (
    sgf_to_xy, xy_to_sgf, display_to_xy, xy_to_display, is_valid_display, to_xy,
)
from .core.replay import Replay, GameRecord, simulate, load_record, build_board_from_sgf
from .core.turn import next_turn, turn_after, color_name
from .sgf.tree import Prop, SgfNode, GameTree, reduce_to_main_line, prune_variations
from .sgf.parser import parse
from .sgf.writer import serialize, extract_main_route, write_sgf
from .sgf.moves import extract_moves, extract_setup, board_size

__all__ = [
    "GoKifuError", "SgfParseError", "CoordinateError",
    "Board", "Move", "Stone", "Color", "EMPTY", "BLACK", "WHITE", "opponent",
    "sgf_to_xy", "xy_to_sgf", "display_to_xy", "xy_to_display", "is_valid_display", "to_xy",
    "Replay", "GameRecord", "simulate", "load_record", "build_board_from_sgf",
    "next_turn", "turn_after", "color_name",
    "Prop", "SgfNode", "GameTree", "reduce_to_main_line", "prune_variations",
    "parse", "serialize", "extract_main_route", "write_sgf",
    "extract_moves", "extract_setup", "board_size",
]
