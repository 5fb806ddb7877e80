from __future__ import annotations
from typing import Optional
from ..core.board import Board, EMPTY, BLACK
from ..core.coords import DISPLAY_LETTERS, XY


def render_ascii(board: Board, last_move: Optional[XY] = None) -> str:
    """简单 ASCII 渲染，带显示坐标（列 A..T 跳过 I，行号自下而上）。last_move 用 '()' 标注。"""
    size = board.size
    rows = []
    header = "    " + "".join(f" {DISPLAY_LETTERS[x]} " for x in range(size))
    rows.append(header)
    for y in range(size):
        line = [f"{size - y:2d}  "]
        for x in range(size):
            v = board.at(x, y)
            if v == EMPTY:
                ch = "."
            elif v == BLACK:
                ch = "X"
            else:
                ch = "O"
            if last_move == (x, y):
                ch = f"({ch})"
            else:
                ch = f" {ch} "
            line.append(ch)
        rows.append("".join(line).rstrip())
    return "\n".join(rows)
