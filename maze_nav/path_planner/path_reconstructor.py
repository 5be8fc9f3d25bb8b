#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径回溯：沿父节点表从终点走回起点
"""

from typing import Dict, List, Optional

from loguru import logger

from maze_nav.core.interfaces import Position


def reconstruct(
    parents: Dict[Position, Optional[Position]],
    start: Position,
    end: Position,
) -> Optional[List[Position]]:
    """
    回溯路径

    Args:
        parents: 父节点表，起点的父节点为 None
        start: 起点
        end: 终点

    Returns:
        从 start 到 end 的位置列表（含两端）；无法到达时返回 None
    """
    if start == end:
        return [start]

    if end not in parents:
        logger.debug(f"终点未被发现，无路径: end={end}")
        return None

    path = [end]
    current = end
    while parents.get(current) is not None:
        current = parents[current]
        path.append(current)
        # 父节点链不可能比父节点表更长
        if len(path) > len(parents):
            logger.error(f"父节点表中存在环，回溯中止: end={end}")
            return None

    if current != start:
        logger.warning(f"父节点链在 {current} 处中断，未回到起点 {start}")
        return None

    path.reverse()
    return path
