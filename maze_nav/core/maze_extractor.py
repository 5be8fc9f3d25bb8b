#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫提取模块：把位图转换为节点图

两种策略:
    - dense: 每个可通行像素一个节点，记录四个方向是否可走
    - sparse: 只在路口/拐角/死胡同建节点，边上记录到下一个路口的格数
"""

from typing import Dict, Iterable, Optional, Set, Tuple

from loguru import logger

from maze_nav.common.constants import DIRECTIONS, STRATEGY_DENSE, STRATEGY_SPARSE
from maze_nav.common.exceptions import EmptyMazeError
from maze_nav.core.bitmap_sampler import BitmapSampler
from maze_nav.core.interfaces import Position
from maze_nav.path_planner.map_model import CorridorNode, DenseNode, NodeGraph


def find_seed(sampler: BitmapSampler) -> Optional[Position]:
    """按行优先扫描，返回第一个可通行像素"""
    for y in range(sampler.height):
        for x in range(sampler.width):
            if sampler.is_open(x, y):
                return (x, y)
    return None


def find_last_open(sampler: BitmapSampler) -> Optional[Position]:
    """按行优先扫描，返回最后一个可通行像素"""
    for y in range(sampler.height - 1, -1, -1):
        for x in range(sampler.width - 1, -1, -1):
            if sampler.is_open(x, y):
                return (x, y)
    return None


def extract_dense(sampler: BitmapSampler) -> NodeGraph:
    """
    逐像素提取

    Args:
        sampler: 位图采样器

    Returns:
        NodeGraph，每个可通行像素一个 DenseNode

    Raises:
        EmptyMazeError: 没有任何可通行像素
    """
    nodes: Dict[Position, DenseNode] = {}
    for y in range(sampler.height):
        for x in range(sampler.width):
            if not sampler.is_open(x, y):
                continue
            nodes[(x, y)] = DenseNode(
                position=(x, y),
                can_go_left=sampler.is_open(x - 1, y),
                can_go_right=sampler.is_open(x + 1, y),
                can_go_up=sampler.is_open(x, y - 1),
                can_go_down=sampler.is_open(x, y + 1),
            )

    if not nodes:
        error_msg = f"迷宫中没有可通行区域: size=({sampler.width}, {sampler.height})"
        logger.error(error_msg)
        raise EmptyMazeError(error_msg)

    logger.info(f"[dense] 提取完成: 节点数={len(nodes)}")
    return NodeGraph(nodes=nodes, width=sampler.width, height=sampler.height, strategy=STRATEGY_DENSE)


def _walk_run(
    sampler: BitmapSampler,
    origin: Position,
    direction: Tuple[int, int],
    anchors: Set[Position],
) -> int:
    """
    沿一个方向逐格探测到下一个路口的距离

    Args:
        sampler: 位图采样器
        origin: 出发位置（必须可通行）
        direction: 方向 (dx, dy)
        anchors: 强制作为节点的位置（起点/终点）

    Returns:
        格数，0 表示该方向不可走
    """
    dx, dy = direction
    # 垂直方向
    px, py = dy, dx
    x, y = origin
    offset = 1
    while True:
        cx, cy = x + dx * offset, y + dy * offset
        if not sampler.is_open(cx, cy):
            # 墙和图像边界一样处理
            return offset - 1
        if (cx, cy) in anchors:
            return offset
        if sampler.is_open(cx + px, cy + py) or sampler.is_open(cx - px, cy - py):
            return offset
        offset += 1


def _build_corridor_node(
    sampler: BitmapSampler,
    position: Position,
    anchors: Set[Position],
) -> Optional[CorridorNode]:
    if not sampler.is_open(*position):
        return None
    # DIRECTIONS 顺序：左、右、上、下
    left, right, top, bottom = (_walk_run(sampler, position, d, anchors) for d in DIRECTIONS)
    return CorridorNode(position=position, left=left, right=right, top=top, bottom=bottom)


def extract_sparse(sampler: BitmapSampler, anchors: Iterable[Position] = ()) -> NodeGraph:
    """
    走廊压缩提取：从种子点出发做迭代 DFS，只记录路口节点

    Args:
        sampler: 位图采样器
        anchors: 额外的种子点，同时视为路口（通常是起点和终点）

    Returns:
        NodeGraph，节点为 CorridorNode

    Raises:
        EmptyMazeError: 没有任何可通行像素
    """
    seed = find_seed(sampler)
    if seed is None:
        error_msg = f"迷宫中没有可通行区域: size=({sampler.width}, {sampler.height})"
        logger.error(error_msg)
        raise EmptyMazeError(error_msg)

    anchor_set: Set[Position] = set()
    for anchor in anchors:
        if sampler.is_open(*anchor):
            anchor_set.add(anchor)
        else:
            logger.warning(f"[sparse] 锚点不在可通行区域，忽略: {anchor}")

    nodes: Dict[Position, CorridorNode] = {}
    visited: Set[Position] = set()
    # 锚点先入栈，种子最后入栈，最先处理
    stack = [a for a in sorted(anchor_set) if a != seed] + [seed]
    visited.update(stack)

    while stack:
        position = stack.pop()
        node = _build_corridor_node(sampler, position, anchor_set)
        if node is None:
            continue
        nodes[position] = node

        for target, _ in node.neighbors():
            if target not in visited:
                visited.add(target)
                stack.append(target)

    logger.info(
        f"[sparse] 提取完成: 节点数={len(nodes)}, "
        f"像素总数={sampler.width * sampler.height}"
    )
    return NodeGraph(nodes=nodes, width=sampler.width, height=sampler.height, strategy=STRATEGY_SPARSE)


class MazeExtractor:
    """
    迷宫提取器

    示例:
        ```python
        extractor = MazeExtractor(BitmapSampler(bitmap, 150), strategy="sparse")
        graph = extractor.extract(anchors=[start, end])
        ```
    """

    def __init__(self, sampler: BitmapSampler, strategy: str = STRATEGY_SPARSE):
        if strategy not in (STRATEGY_SPARSE, STRATEGY_DENSE):
            raise ValueError(f"未知的提取策略: {strategy}")
        self.sampler_ = sampler
        self.strategy_ = strategy

    @property
    def strategy(self) -> str:
        return self.strategy_

    def extract(self, anchors: Iterable[Position] = ()) -> NodeGraph:
        logger.debug(
            f"开始提取迷宫: strategy={self.strategy_}, "
            f"size=({self.sampler_.width}, {self.sampler_.height})"
        )
        if self.strategy_ == STRATEGY_DENSE:
            return extract_dense(self.sampler_)
        return extract_sparse(self.sampler_, anchors)
