# go_kifu/core/replay.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
from loguru import logger

from .board import Board, Move, Stone, BLACK, WHITE, Color
from .coords import DEFAULT_SIZE
from ..sgf.moves import board_size, extract_moves, extract_setup
from ..sgf.parser import parse
from ..sgf.tree import GameTree, reduce_to_main_line


@dataclass
class Replay:
    """一次回放的结果：盘面、最后一手、双方提子数、实际执行的着手数。"""
    board: Board
    last_move: Optional[Move] = None
    captures: Dict[Color, int] = field(default_factory=lambda: {BLACK: 0, WHITE: 0})
    moves_applied: int = 0

    @property
    def grid(self):
        return self.board.grid


def simulate(setup: Iterable[Stone], moves: List[Move], up_to: Optional[int] = None,
             size: int = DEFAULT_SIZE) -> Replay:
    """在新棋盘上先摆 setup，再按顺序落前 up_to 手（None 表示全部）。

    摆子不做提子检查；落子后提掉无气的相邻对方块，己方无气则自身消失。
    棋盘外的摆子/着手跳过。
    """
    board = Board(size)
    for s in setup:
        if not board.in_bounds((s.x, s.y)):
            logger.warning(f"simulate: setup stone {s} is off a {size}x{size} board, skipped")
            continue
        board.place(s.x, s.y, s.color)

    limit = len(moves) if up_to is None else min(max(int(up_to), 0), len(moves))
    replay = Replay(board=board)
    for mv in moves[:limit]:
        if not board.in_bounds(mv.point):
            logger.warning(f"simulate: move {mv} is off a {size}x{size} board, skipped")
            continue
        replay.captures[mv.color] += board.play(mv.color, mv.point)
        replay.last_move = mv
        replay.moves_applied += 1
    return replay


@dataclass
class GameRecord:
    """解析后的主线棋谱：盘面大小、摆子、着手序列以及裁剪后的主线树。"""
    size: int = DEFAULT_SIZE
    setup: List[Stone] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)
    tree: GameTree = field(default_factory=GameTree)

    def replay(self, up_to: Optional[int] = None) -> Replay:
        return simulate(self.setup, self.moves, up_to=up_to, size=self.size)


def load_record(text: str, strict: bool = False, default_size: int = DEFAULT_SIZE) -> GameRecord:
    """SGF 文本 -> 森林 -> 主线 -> (盘面大小, 摆子, 着手)。空输入得到空棋谱。"""
    tree = reduce_to_main_line(parse(text, strict=strict))
    if tree.is_empty():
        return GameRecord(size=default_size, tree=tree)
    size = board_size(tree, default_size)
    return GameRecord(
        size=size,
        setup=extract_setup(tree, size),
        moves=extract_moves(tree, size),
        tree=tree,
    )


def build_board_from_sgf(text: str, max_moves: Optional[int] = None) -> Replay:
    """从 SGF 文本直接得到第 max_moves 手时的盘面（缩略图/OGP 渲染用）。"""
    return load_record(text).replay(up_to=max_moves)
