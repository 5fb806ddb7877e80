# go_kifu/sgf/parser.py
from __future__ import annotations
from typing import List, Optional
from loguru import logger

from ..errors import SgfParseError
from .tree import GameTree

_WS = " \t\r\n"


class _Problem(Exception):
    """内部信号：容错模式下记录并停止，严格模式下转成 SgfParseError。"""

    def __init__(self, message: str, pos: int) -> None:
        super().__init__(message)
        self.message = message
        self.pos = pos


def parse(text: str, strict: bool = False) -> GameTree:
    """把 SGF 文本解析为 GameTree（森林）。

    逐字符扫描，维护“是否处于 [...] 值内部”的状态：
      - 值内部：反斜杠转义下一个字符（包括 ']' 与 '\\'），反斜杠+换行为软换行，直接丢弃；
      - 值外部：'(' 压栈当前节点，')' 出栈，';' 新建当前节点的子节点（顶层时为新根），
        字母串 + 一个或多个 [..] 构成一个属性（如 AB[aa][bb]）。
    容错：遇到无法恢复的结构（值未闭合、括号不配对等）时返回已经建好的部分森林；
    未闭合的尾部属性被丢弃，不会影响之前的节点。strict=True 时改为抛 SgfParseError。
    """
    tree = GameTree()
    if not isinstance(text, str) or not text:
        return tree
    try:
        _scan(text, tree, strict)
    except _Problem as e:
        if strict:
            raise SgfParseError(e.message, e.pos) from None
        logger.warning(f"SGF parse recovered at offset {e.pos}: {e.message}; "
                       f"keeping {len(tree)} node(s)")
    return tree


def _scan(text: str, tree: GameTree, strict: bool) -> None:
    n = len(text)
    stack: List[Optional[int]] = []   # '(' 时压入当时的挂载点
    tail: Optional[int] = None        # 下一个 ';' 挂在它下面
    current: Optional[int] = None     # 正在接收属性的节点；'(' 与 ')' 之后为 None
    ident = ""                        # 正在读取的属性标识符
    pending: Optional[str] = None     # 刚读完值、还可以继续追加值的属性名
    i = 0

    while i < n:
        ch = text[i]

        # 游戏树之外的文本全部忽略
        if not stack:
            if ch == "(":
                stack.append(tail)
            i += 1
            continue

        if ch == "[":
            if not ident and not pending:
                raise _Problem("property value without identifier", i)
            if current is None:
                raise _Problem(f"property {ident or pending} outside of a node", i)
            value, i = _read_value(text, i + 1)
            props = tree.nodes[current].props
            if ident:
                props.append((ident, [value]))
                pending, ident = ident, ""
            else:
                props[-1][1].append(value)
            continue

        if ch.isalpha():
            pending = None
            # FF3 的长标识符（如 AddBlack）只保留大写字母
            if ch.isupper():
                ident += ch
            i += 1
            continue

        if ch in _WS:
            i += 1
            if ident:
                # 标识符与 '[' 之间可以有空白，但标识符内部不行（"A B[aa]" 不是 AB）
                while i < n and text[i] in _WS:
                    i += 1
                if i < n and text[i] != "[":
                    raise _Problem(f"property {ident} has no value", i)
            continue

        if ident:
            raise _Problem(f"property {ident} has no value", i)

        pending = None
        if ch == "(":
            stack.append(tail)
            current = None
        elif ch == ")":
            tail = stack.pop()
            current = None
        elif ch == ";":
            tail = current = tree.add_node(tail)
        elif strict:
            raise _Problem(f"unexpected character {ch!r}", i)
        else:
            logger.debug(f"SGF: skipping unexpected character {ch!r} at offset {i}")
        i += 1

    if ident:
        raise _Problem(f"property {ident} has no value", n)
    if stack:
        raise _Problem(f"{len(stack)} unclosed '('", n)


def _read_value(text: str, i: int):
    """读取 '[' 之后直到未转义 ']' 的值，返回 (value, ']' 之后的下标)。"""
    n = len(text)
    buf: List[str] = []
    start = i
    while i < n:
        ch = text[i]
        if ch == "\\":
            if i + 1 >= n:
                break
            nxt = text[i + 1]
            if nxt == "\r" and i + 2 < n and text[i + 2] == "\n":
                i += 3
                continue
            if nxt not in "\r\n":
                buf.append(nxt)
            i += 2
            continue
        if ch == "]":
            return "".join(buf), i + 1
        buf.append(ch)
        i += 1
    raise _Problem("unterminated property value", start - 1)
