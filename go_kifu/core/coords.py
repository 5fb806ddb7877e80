# go_kifu/core/coords.py
from __future__ import annotations
import re
from typing import Optional, Tuple

from ..errors import CoordinateError

XY = Tuple[int, int]  # (x, y)：x=列（左→右），y=行（上→下），均从 0 开始

DEFAULT_SIZE = 19
# 显示坐标的列字母：跳过 I（A..H, J..T）
DISPLAY_LETTERS = "ABCDEFGHJKLMNOPQRST"
_DISPLAY_RE = re.compile(r"([A-Z])([0-9]{1,2})")


# ---------- SGF 坐标 ----------
def sgf_to_xy(s: str, size: int = DEFAULT_SIZE) -> Optional[XY]:
    """"pd" -> (15, 3)。长度不为 2 或字母越界时返回 None（不抛异常）。"""
    if not isinstance(s, str) or len(s) != 2:
        return None
    x = ord(s[0]) - ord("a")
    y = ord(s[1]) - ord("a")
    if not (0 <= x < size and 0 <= y < size):
        return None
    return (x, y)


def xy_to_sgf(x: int, y: int, size: int = DEFAULT_SIZE) -> Optional[str]:
    if not (0 <= x < size and 0 <= y < size):
        return None
    return f"{chr(ord('a') + x)}{chr(ord('a') + y)}"


# ---------- 显示坐标（A19 在左上，T1 在右下） ----------
def display_to_xy(s: str, size: int = DEFAULT_SIZE) -> Optional[XY]:
    """"Q4" -> (15, 15)。列字母不含 I；行号 1..size，y = size - row。"""
    if not isinstance(s, str):
        return None
    m = _DISPLAY_RE.fullmatch(s)
    if not m:
        return None
    letter, digits = m.group(1), m.group(2)
    if digits.startswith("0"):
        return None
    x = DISPLAY_LETTERS.find(letter)
    row = int(digits)
    if x < 0 or x >= size or not (1 <= row <= size):
        return None
    return (x, size - row)


def xy_to_display(x: int, y: int, size: int = DEFAULT_SIZE) -> Optional[str]:
    if not (0 <= x < size and 0 <= y < size) or size > len(DISPLAY_LETTERS):
        return None
    return f"{DISPLAY_LETTERS[x]}{size - y}"


def is_valid_display(s: str, size: int = DEFAULT_SIZE) -> bool:
    return display_to_xy(s, size) is not None


def to_xy(s: str, size: int = DEFAULT_SIZE) -> XY:
    """严格版本：自动识别两种编码（小写字母对 = SGF，大写字母 + 数字 = 显示坐标）。

    两种都解析失败时抛 CoordinateError。
    """
    p = sgf_to_xy(s, size) if isinstance(s, str) and s.islower() else display_to_xy(s, size)
    if p is None:
        raise CoordinateError(f"invalid coordinate: {s!r}")
    return p
