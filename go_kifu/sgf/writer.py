# go_kifu/sgf/writer.py
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple, Union
from loguru import logger

from ..core.coords import XY, xy_to_sgf
from .parser import parse
from .tree import GameTree, Property, prune_variations


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("]", "\\]")


def _props_to_sgf(props: List[Property]) -> str:
    return "".join(ident + "".join(f"[{_escape(v)}]" for v in vals) for ident, vals in props)


def serialize(tree: GameTree) -> str:
    """GameTree -> SGF 文本（无换行、无缩进，属性保持节点内原顺序）。

    线性链输出为 (;..;..;..)；有分支时每个变化图各自加括号。用显式栈遍历。
    """
    out: List[str] = []
    stack: List[Union[str, int]] = []
    for root in reversed(tree.roots):
        stack.extend([")", root, "("])
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        node = tree.nodes[item]
        out.append(";" + _props_to_sgf(node.props))
        if len(node.children) == 1:
            stack.append(node.children[0])
        else:
            for child in reversed(node.children):
                stack.extend([")", child, "("])
    return "".join(out)


def extract_main_route(text: str) -> str:
    """删除所有分支，每棵游戏树只保留主线，返回 SGF 文本。

    找不到任何游戏树时原样返回输入。
    """
    tree = parse(text)
    if tree.is_empty():
        logger.warning("extract_main_route: no game tree found, returning input unchanged")
        return text
    return serialize(prune_variations(tree))


def write_sgf(moves: Iterable[Tuple[str, Optional[XY]]], size: int = 19, komi: float = 6.5,
              result: Optional[str] = None,
              pb: str = "Black", pw: str = "White") -> str:
    """moves: 序列如 [("B",(x,y)), ("W",None), ...]；None 表示 pass（写成空值 []）。"""
    header = f"(;GM[1]FF[4]SZ[{size}]KM[{komi}]PB[{_escape(pb)}]PW[{_escape(pw)}]"
    if result:
        header += f"RE[{_escape(result)}]"
    body = []
    for color, p in moves:
        coord = "" if p is None else xy_to_sgf(p[0], p[1], size)
        if coord is None:
            raise ValueError(f"write_sgf: point {p} is off a {size}x{size} board")
        body.append(f";{color}[{coord}]")
    return header + "".join(body) + ")"
