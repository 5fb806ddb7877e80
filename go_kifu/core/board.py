# go_kifu/core/board.py
from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from typing import Iterable, List, Set, Tuple
from loguru import logger

from .coords import XY

Color = int
EMPTY: Color = 0
BLACK: Color = 1
WHITE: Color = -1

MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 19  # SGF 字母 a..s；更大的盘 "tt" 会与 pass 冲突


def opponent(color: Color) -> Color:
    return -color


@dataclass(frozen=True)
class Move:
    color: Color
    x: int
    y: int

    @property
    def point(self) -> XY:
        return (self.x, self.y)


@dataclass(frozen=True)
class Stone:
    """摆子（AB/AW）或盘面上的一颗石子。"""
    x: int
    y: int
    color: Color


class Board:
    """围棋棋盘：落子 + 提子（只按“气为零”机械提子）。

    网格：int8，grid[y, x]；0=空, 1=黑, -1=白。
    不判劫、不禁自杀：自杀的棋块在落子后直接消失（用于回放棋谱，而非裁判对局）。
    """

    def __init__(self, size: int = 19) -> None:
        self.size = int(size)
        self.grid = np.zeros((self.size, self.size), dtype=np.int8)

    # ---------- 基础 ----------
    def in_bounds(self, p: XY) -> bool:
        x, y = p
        return 0 <= x < self.size and 0 <= y < self.size

    def neighbors(self, p: XY) -> Iterable[XY]:
        x, y = p
        for nx, ny in ((x-1, y), (x+1, y), (x, y-1), (x, y+1)):
            if 0 <= nx < self.size and 0 <= ny < self.size:
                yield (nx, ny)

    def at(self, x: int, y: int) -> Color:
        return int(self.grid[y, x])

    def get(self, p: XY) -> Color:
        return int(self.grid[p[1], p[0]])

    def set(self, p: XY, color: Color) -> None:
        self.grid[p[1], p[0]] = color

    def copy(self) -> "Board":
        b = Board(self.size)
        b.grid = self.grid.copy()
        return b

    # ---------- 连通块与气 ----------
    def collect_group(self, start: XY) -> Tuple[Set[XY], Set[XY]]:
        """从 start 出发 flood fill 同色连通块，返回 (块内所有点, 气)。"""
        color = self.get(start)
        if color not in (BLACK, WHITE):
            raise ValueError(f"collect_group: no stone at {start}")
        visited: Set[XY] = set([start])
        liberties: Set[XY] = set()
        stack = [start]
        while stack:
            p = stack.pop()
            for q in self.neighbors(p):
                cq = self.get(q)
                if cq == EMPTY:
                    liberties.add(q)
                elif cq == color and q not in visited:
                    visited.add(q)
                    stack.append(q)
        return visited, liberties

    def has_liberty(self, start: XY) -> bool:
        """只判断有没有气，找到第一口气即返回。"""
        color = self.get(start)
        visited: Set[XY] = set([start])
        stack = [start]
        while stack:
            p = stack.pop()
            for q in self.neighbors(p):
                cq = self.get(q)
                if cq == EMPTY:
                    return True
                if cq == color and q not in visited:
                    visited.add(q)
                    stack.append(q)
        return False

    def _remove_group(self, group: Iterable[XY]) -> int:
        cnt = 0
        for p in group:
            if self.get(p) != EMPTY:
                self.set(p, EMPTY)
                cnt += 1
        return cnt

    # ---------- 摆子与落子 ----------
    def place(self, x: int, y: int, color: Color) -> None:
        """直接摆子（AB/AW），不做提子检查。"""
        if not self.in_bounds((x, y)):
            raise ValueError(f"place: ({x}, {y}) is off the board")
        self.set((x, y), color)

    def play(self, color: Color, p: XY) -> int:
        """落一手并结算。返回提掉的对方子数（自杀消失的己方子不计入）。"""
        if not self.in_bounds(p):
            raise ValueError(f"play: {p} is off the board")
        if self.get(p) != EMPTY:
            logger.warning(f"play: {p} already occupied, overwriting")
        self.set(p, color)

        # 先提对方无气块
        opp = opponent(color)
        to_capture: Set[XY] = set()
        for q in self.neighbors(p):
            if self.get(q) == opp and q not in to_capture:
                group, libs = self.collect_group(q)
                if not libs:
                    to_capture |= group
        captured = self._remove_group(to_capture)

        # 再看己方：无气则整块消失（允许自杀）
        if not self.has_liberty(p):
            group, _ = self.collect_group(p)
            self._remove_group(group)
        return captured

    # ---------- 统计与枚举 ----------
    def stones_count(self, color: Color) -> int:
        return int((self.grid == color).sum())

    def stones(self) -> List[Stone]:
        """按 (x, y) 顺序列出盘上所有石子，供绘图使用。"""
        out: List[Stone] = []
        for x in range(self.size):
            for y in range(self.size):
                v = int(self.grid[y, x])
                if v != EMPTY:
                    out.append(Stone(x, y, v))
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.grid, other.grid))
