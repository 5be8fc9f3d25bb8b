#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
节点图数据模型：位置、两种节点形式、节点图和搜索结果
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple, Union

from maze_nav.core.interfaces import Position


def manhattan(a: Position, b: Position) -> int:
    """曼哈顿距离"""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def path_length(path: Optional[List[Position]]) -> int:
    """
    路径步数（像素）

    稀疏图中相邻两点之间是一条直线走廊，因此按曼哈顿距离累加。
    """
    if not path:
        return 0
    return sum(manhattan(path[i - 1], path[i]) for i in range(1, len(path)))


@dataclass(frozen=True)
class DenseNode:
    """逐像素节点：四个方向上相邻像素是否可通行"""
    position: Position
    can_go_left: bool
    can_go_right: bool
    can_go_up: bool
    can_go_down: bool

    def neighbors(self) -> List[Tuple[Position, int]]:
        x, y = self.position
        result = []
        if self.can_go_left:
            result.append(((x - 1, y), 1))
        if self.can_go_right:
            result.append(((x + 1, y), 1))
        if self.can_go_up:
            result.append(((x, y - 1), 1))
        if self.can_go_down:
            result.append(((x, y + 1), 1))
        return result


@dataclass(frozen=True)
class CorridorNode:
    """走廊节点：到下一个路口的格数，0=该方向无边"""
    position: Position
    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0

    def neighbors(self) -> List[Tuple[Position, int]]:
        x, y = self.position
        result = []
        if self.left:
            result.append(((x - self.left, y), self.left))
        if self.right:
            result.append(((x + self.right, y), self.right))
        if self.top:
            result.append(((x, y - self.top), self.top))
        if self.bottom:
            result.append(((x, y + self.bottom), self.bottom))
        return result


Node = Union[DenseNode, CorridorNode]


@dataclass
class NodeGraph:
    """位置 → 节点 的映射，提取完成后只读"""
    nodes: Dict[Position, Node]
    width: int
    height: int
    strategy: str

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, position: Position) -> bool:
        return position in self.nodes

    def __iter__(self) -> Iterator[Position]:
        return iter(self.nodes)

    def get(self, position: Position) -> Optional[Node]:
        return self.nodes.get(position)

    def neighbors(self, position: Position) -> List[Tuple[Position, int]]:
        node = self.nodes.get(position)
        if node is None:
            return []
        return node.neighbors()

    def dangling_edges(self) -> List[Tuple[Position, Position]]:
        """返回所有指向图外的边，正常提取结果应为空"""
        return [
            (pos, target)
            for pos, node in self.nodes.items()
            for target, _ in node.neighbors()
            if target not in self.nodes
        ]


@dataclass
class SearchResult:
    """一次搜索的全部状态"""
    start: Position
    end: Position
    found: bool = False
    closed: Set[Position] = field(default_factory=set)
    expansion_order: List[Position] = field(default_factory=list)
    parents: Dict[Position, Optional[Position]] = field(default_factory=dict)
    costs: Dict[Position, int] = field(default_factory=dict)

    @property
    def expanded(self) -> int:
        return len(self.expansion_order)
