# go_kifu/core/turn.py
from __future__ import annotations
from typing import Optional, Union
from loguru import logger

from .board import BLACK, WHITE, Color, opponent
from ..sgf.moves import board_size, extract_moves, last_move_color
from ..sgf.parser import parse
from ..sgf.tree import reduce_to_main_line

_TURN_NAMES = {"black": BLACK, "b": BLACK, "white": WHITE, "w": WHITE}


def color_name(color: Color) -> str:
    return "white" if color == WHITE else "black"


def _annotation_to_color(turn: Union[str, int]) -> Optional[Color]:
    if isinstance(turn, str):
        return _TURN_NAMES.get(turn.strip().lower())
    if turn in (BLACK, WHITE):
        return int(turn)
    return None


def next_turn(sgf_text: str, move_count: Optional[int] = None,
              turn: Optional[Union[str, int]] = None) -> Color:
    """判定下一手由谁下。

    优先级：显式 turn 标注 > move_count 奇偶（偶数黑、奇数白）> 主线最后一个节点的颜色取反。
    没有任何着手时为黑；任何异常都退化为黑，不向调用方抛出。
    """
    try:
        if turn is not None:
            color = _annotation_to_color(turn)
            if color is not None:
                return color
            logger.warning(f"next_turn: ignoring unrecognised turn annotation {turn!r}")
        if move_count is not None:
            return BLACK if int(move_count) % 2 == 0 else WHITE
        last = last_move_color(reduce_to_main_line(parse(sgf_text)))
        return BLACK if last is None else opponent(last)
    except Exception as e:
        logger.exception(f"next_turn failed, defaulting to black: {e}")
        return BLACK


def turn_after(sgf_text: str, move_number: int) -> Color:
    """前 move_number 手（超出时按全部）落完之后轮到谁：最后一手颜色取反，没有着手时为黑。"""
    try:
        tree = reduce_to_main_line(parse(sgf_text))
        moves = extract_moves(tree, board_size(tree))
        n = min(max(int(move_number), 0), len(moves))
        return BLACK if n == 0 else opponent(moves[n - 1].color)
    except Exception as e:
        logger.exception(f"turn_after failed, defaulting to black: {e}")
        return BLACK
