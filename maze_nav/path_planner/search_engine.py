#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
搜索引擎模块：在节点图上做最优先搜索

open 表为 heapq 小顶堆，closed 集合记录已展开节点。
默认优先级为 min(g, h)，偏向终点但仍受已走距离影响；
它不满足 A* 的可采纳性，找到的路径不保证最短。
"""

# 标准库导入
import heapq
import itertools
import time
from typing import Callable, Dict, List, Optional, Tuple

# 第三方库导入
from loguru import logger

from maze_nav.common.constants import (
    PRIORITY_ASTAR,
    PRIORITY_GREEDY,
    PRIORITY_HYBRID,
    UPDATE_ALWAYS,
    UPDATE_IMPROVE,
)
from maze_nav.common.exceptions import SearchTimeoutError
from maze_nav.core.interfaces import Position
from maze_nav.path_planner.map_model import NodeGraph, SearchResult, manhattan

# 时钟，测试中可替换
_clock = time.monotonic

PriorityFn = Callable[[int, int], int]

PRIORITY_FUNCTIONS: Dict[str, PriorityFn] = {
    PRIORITY_HYBRID: lambda g, h: min(g, h),
    PRIORITY_ASTAR: lambda g, h: g + h,
    PRIORITY_GREEDY: lambda g, h: h,
}


class SearchEngine:
    """
    最优先搜索器

    示例:
        ```python
        engine = SearchEngine(priority="hybrid")
        result = engine.search(graph, start=(0, 2), end=(4, 2))
        ```
    """

    def __init__(
        self,
        priority: str = PRIORITY_HYBRID,
        update_policy: str = UPDATE_ALWAYS,
        timeout_s: Optional[float] = None,
    ):
        """
        初始化搜索器

        Args:
            priority: 优先级函数 hybrid=min(g,h), astar=g+h, greedy=h
            update_policy: always=每次发现都覆盖父节点和代价, improve=仅在更优时覆盖
            timeout_s: 搜索时限（秒），None 表示不限

        Raises:
            ValueError: 输入参数无效
        """
        if priority not in PRIORITY_FUNCTIONS:
            raise ValueError(f"未知的优先级函数: {priority}")
        if update_policy not in (UPDATE_ALWAYS, UPDATE_IMPROVE):
            raise ValueError(f"未知的更新策略: {update_policy}")
        if timeout_s is not None and timeout_s <= 0:
            raise ValueError(f"timeout_s必须大于0: {timeout_s}")

        self.priority_name_ = priority
        self.priority_fn_ = PRIORITY_FUNCTIONS[priority]
        self.update_policy_ = update_policy
        self.timeout_s_ = timeout_s

    def search(self, graph: NodeGraph, start: Position, end: Position) -> SearchResult:
        """
        从 start 搜索到 end

        Args:
            graph: 节点图（只读）
            start: 起点
            end: 终点

        Returns:
            SearchResult；found=False 表示 open 表耗尽仍未到达终点

        Raises:
            SearchTimeoutError: 超过时限
        """
        result = SearchResult(start=start, end=end)

        if start not in graph:
            logger.warning(f"[search] 起点不在节点图中: {start}")
        if end not in graph:
            logger.warning(f"[search] 终点不在节点图中: {end}")

        logger.debug(
            f"[search] 开始搜索: start={start}, end={end}, nodes={len(graph)}, "
            f"priority={self.priority_name_}, update_policy={self.update_policy_}"
        )

        result.costs[start] = 0
        result.parents[start] = None

        # (priority, 序号, position)，序号保证同优先级时先进先出
        counter = itertools.count()
        open_list: List[Tuple[int, int, Position]] = [(0, next(counter), start)]
        deadline = None if self.timeout_s_ is None else _clock() + self.timeout_s_

        while open_list:
            if deadline is not None and _clock() > deadline:
                error_msg = (
                    f"[search] 搜索超时: timeout_s={self.timeout_s_}, "
                    f"已展开节点数={result.expanded}"
                )
                logger.error(error_msg)
                raise SearchTimeoutError(error_msg)

            _, _, current = heapq.heappop(open_list)

            # 懒删除：过期条目直接跳过
            if current in result.closed:
                continue
            result.closed.add(current)
            result.expansion_order.append(current)

            if current == end:
                result.found = True
                logger.info(
                    f"[search] 找到终点: cost={result.costs[end]}, 展开节点数={result.expanded}"
                )
                return result

            current_cost = result.costs[current]
            for neighbor, step in graph.neighbors(current):
                if neighbor in result.closed:
                    continue

                tentative_cost = current_cost + step
                if (
                    self.update_policy_ == UPDATE_IMPROVE
                    and neighbor in result.costs
                    and tentative_cost >= result.costs[neighbor]
                ):
                    continue

                result.costs[neighbor] = tentative_cost
                result.parents[neighbor] = current
                priority = self.priority_fn_(tentative_cost, manhattan(neighbor, end))
                heapq.heappush(open_list, (priority, next(counter), neighbor))

        logger.warning(
            f"[search] 无法找到从起点到终点的路径: start={start}, end={end}, "
            f"展开节点数={result.expanded}"
        )
        return result


def search(
    graph: NodeGraph,
    start: Position,
    end: Position,
    priority: str = PRIORITY_HYBRID,
    update_policy: str = UPDATE_ALWAYS,
    timeout_s: Optional[float] = None,
) -> SearchResult:
    """便捷函数，等价于 SearchEngine(...).search(graph, start, end)"""
    return SearchEngine(priority, update_policy, timeout_s).search(graph, start, end)
