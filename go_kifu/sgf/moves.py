# go_kifu/sgf/moves.py
from __future__ import annotations
from typing import List, Optional, Sequence, Union
from loguru import logger

from ..core.board import BLACK, WHITE, MAX_BOARD_SIZE, MIN_BOARD_SIZE, Color, Move, Stone
from ..core.coords import DEFAULT_SIZE, XY, sgf_to_xy
from .tree import GameTree, Prop, SgfNode

Chain = Union[GameTree, Sequence[SgfNode]]

PASS_TOKENS = ("", "tt")
_MOVE_PROPS = ((Prop.B, BLACK), (Prop.W, WHITE))
_SETUP_PROPS = ((Prop.AB, BLACK), (Prop.AW, WHITE))


def _as_chain(chain: Chain) -> Sequence[SgfNode]:
    if isinstance(chain, GameTree):
        return chain.main_line()
    return chain


def board_size(chain: Chain, default: int = DEFAULT_SIZE) -> int:
    """根节点 SZ；缺失、无法解析（如 19:13）或超出范围时回退到 default（19）。"""
    nodes = _as_chain(chain)
    if not nodes:
        return default
    raw = nodes[0].first(Prop.SZ)
    if raw is None:
        return default
    try:
        size = int(raw.strip())
    except ValueError:
        logger.warning(f"SZ[{raw}] is not a square board size, using {default}")
        return default
    if not (MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE):
        logger.warning(f"SZ[{raw}] out of range [{MIN_BOARD_SIZE}, {MAX_BOARD_SIZE}], using {default}")
        return default
    return size


def extract_moves(chain: Chain, size: int = DEFAULT_SIZE) -> List[Move]:
    """沿主线依次取出 B/W 着手（每个节点只看第一个值）。

    pass（空值或 "tt"）与非法坐标跳过。同一节点同时有 B 和 W 时先 B 后 W。
    """
    moves: List[Move] = []
    for node in _as_chain(chain):
        for prop, color in _MOVE_PROPS:
            vals = node.values(prop)
            if vals is None:
                continue
            value = vals[0].strip() if vals else ""
            if value in PASS_TOKENS:
                continue
            p = sgf_to_xy(value, size)
            if p is None:
                logger.debug(f"skipping malformed move {prop.value}[{value}]")
                continue
            moves.append(Move(color, p[0], p[1]))
    return moves


def extract_setup(chain: Chain, size: int = DEFAULT_SIZE) -> List[Stone]:
    """收集主线上所有 AB/AW 摆子（先 AB 后 AW，节点内按值的顺序）。

    支持 FF4 的压缩点列表 "aa:cc"（矩形区域）。
    """
    stones: List[Stone] = []
    for node in _as_chain(chain):
        for prop, color in _SETUP_PROPS:
            for value in node.values(prop) or []:
                points = _expand_point_list(value.strip(), size)
                if points is None:
                    logger.debug(f"skipping malformed setup stone {prop.value}[{value}]")
                    continue
                stones.extend(Stone(x, y, color) for x, y in points)
    return stones


def _expand_point_list(value: str, size: int) -> Optional[List[XY]]:
    if ":" not in value:
        p = sgf_to_xy(value, size)
        return None if p is None else [p]
    a, _, b = value.partition(":")
    p1, p2 = sgf_to_xy(a, size), sgf_to_xy(b, size)
    if p1 is None or p2 is None:
        return None
    xs = range(min(p1[0], p2[0]), max(p1[0], p2[0]) + 1)
    ys = range(min(p1[1], p2[1]), max(p1[1], p2[1]) + 1)
    return [(x, y) for y in ys for x in xs]


def last_move_color(chain: Chain) -> Optional[Color]:
    """主线最后一个节点上的着手颜色（B/W 同时存在时取 W）；没有着手属性时返回 None。"""
    nodes = _as_chain(chain)
    if not nodes:
        return None
    last = nodes[-1]
    if last.has(Prop.W):
        return WHITE
    if last.has(Prop.B):
        return BLACK
    return None
