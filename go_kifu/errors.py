from __future__ import annotations


class GoKifuError(ValueError):
    """go_kifu 异常基类（沿用 ValueError 语义，调用方可统一 except ValueError）。"""


class SgfParseError(GoKifuError):
    """严格模式下 SGF 结构无法恢复（括号/方括号不配对等）。"""

    def __init__(self, message: str, pos: int = -1) -> None:
        super().__init__(message if pos < 0 else f"{message} (at offset {pos})")
        self.pos = pos


class CoordinateError(GoKifuError):
    """坐标字符串既不是 SGF 坐标也不是盘面显示坐标。"""
