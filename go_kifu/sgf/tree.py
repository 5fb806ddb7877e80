# go_kifu/sgf/tree.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

Property = Tuple[str, List[str]]  # (标识符, 值列表)


class Prop(str, Enum):
    """引擎会解释的 SGF 属性（封闭集合）；其余属性只原样保存，不做解释。"""
    SZ = "SZ"
    AB = "AB"
    AW = "AW"
    B = "B"
    W = "W"


@dataclass
class SgfNode:
    """一个 SGF 节点：按原顺序保存的属性列表 + 子节点下标（指向所属 GameTree.nodes）。

    children[0] 约定为主线（principal continuation）。
    """
    props: List[Property] = field(default_factory=list)
    children: List[int] = field(default_factory=list)

    def values(self, prop: Prop) -> Optional[List[str]]:
        # 同名属性重复出现时只取第一次
        for ident, vals in self.props:
            if ident == prop.value:
                return vals
        return None

    def has(self, prop: Prop) -> bool:
        return self.values(prop) is not None

    def first(self, prop: Prop) -> Optional[str]:
        vals = self.values(prop)
        if not vals:
            return None
        return vals[0]


@dataclass
class GameTree:
    """SGF 森林，节点集中存放在 nodes 中（arena），以下标互相引用。

    没有 parent 指针；遍历全部用显式循环/栈，不依赖递归深度。
    """
    nodes: List[SgfNode] = field(default_factory=list)
    roots: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def is_empty(self) -> bool:
        return not self.roots

    def add_node(self, parent: Optional[int] = None) -> int:
        idx = len(self.nodes)
        self.nodes.append(SgfNode())
        if parent is None:
            self.roots.append(idx)
        else:
            self.nodes[parent].children.append(idx)
        return idx

    def main_line(self, root: int = 0) -> List[SgfNode]:
        """沿第一个子节点走到底，返回节点链（root 为 roots 的序号）。"""
        if root >= len(self.roots):
            return []
        chain: List[SgfNode] = []
        idx: Optional[int] = self.roots[root]
        while idx is not None:
            node = self.nodes[idx]
            chain.append(node)
            idx = node.children[0] if node.children else None
        return chain


def _copy_chain(tree: GameTree, root: int, out: GameTree) -> None:
    parent: Optional[int] = None
    for node in tree.main_line(root):
        idx = out.add_node(parent)
        out.nodes[idx].props = [(ident, list(vals)) for ident, vals in node.props]
        parent = idx


def reduce_to_main_line(tree: GameTree) -> GameTree:
    """只保留第一棵树的主线：每个节点仅留第一个子节点，其余变化图全部丢弃。

    结果是新的 arena（线性链，下标 0..n-1），原树不被修改；对结果再次调用是 no-op。
    """
    out = GameTree()
    _copy_chain(tree, 0, out)
    return out


def prune_variations(tree: GameTree) -> GameTree:
    """对森林中的每一棵树都只保留主线，树的个数与顺序不变。原树不被修改。"""
    out = GameTree()
    for root in range(len(tree.roots)):
        _copy_chain(tree, root, out)
    return out
