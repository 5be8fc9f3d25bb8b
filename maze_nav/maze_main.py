#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解主程序

流水线: 读图 → 提取节点图 → 搜索 → 回溯路径 → 渲染并保存
"""

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import yaml
from loguru import logger

from maze_nav.common.exceptions import ConfigurationError, EmptyMazeError, MazeError
from maze_nav.config.loader import load_config
from maze_nav.config.models import MazeConfig
from maze_nav.core.bitmap_sampler import BitmapSampler, load_bitmap
from maze_nav.core.interfaces import Position
from maze_nav.core.maze_extractor import MazeExtractor, find_last_open, find_seed
from maze_nav.path_planner.map_model import path_length
from maze_nav.path_planner.path_reconstructor import reconstruct
from maze_nav.path_planner.search_engine import SearchEngine
from maze_nav.ui.canvas import ImageCanvas, render_search
from maze_nav.utils.logger import SetupLogger


@dataclass
class SolveReport:
    """一次求解的汇总信息"""
    start: Position
    end: Position
    node_count: int
    expanded: int
    found: bool
    path: Optional[List[Position]]
    path_length: int
    elapsed_s: float


def _resolve_endpoints(config: MazeConfig, sampler: BitmapSampler):
    """起点/终点：配置优先，否则取第一个和最后一个可通行像素"""
    start = config.search.start
    end = config.search.end
    if start is None:
        start = find_seed(sampler)
    if end is None:
        end = find_last_open(sampler)
    if start is None or end is None:
        error_msg = f"迷宫中没有可通行区域: size=({sampler.width}, {sampler.height})"
        logger.error(error_msg)
        raise EmptyMazeError(error_msg)

    for name, pos in (("起点", start), ("终点", end)):
        if pos[0] >= sampler.width or pos[1] >= sampler.height:
            error_msg = f"{name}超出迷宫范围: {pos}, size=({sampler.width}, {sampler.height})"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)
        if not sampler.is_open(*pos):
            logger.warning(f"{name}位于墙上: {pos}")

    return tuple(start), tuple(end)


def solve_maze(
    config: MazeConfig,
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
) -> SolveReport:
    """
    求解迷宫图像

    Args:
        config: 配置
        input_path: 输入图像路径
        output_path: 输出图像路径，None 时不渲染

    Returns:
        SolveReport；找不到路径时 found=False、path=None，仍会渲染展开区域

    Raises:
        ImageDecodeError: 图像不存在或无法解码
        EmptyMazeError: 没有可通行像素
        ConfigurationError: 外框宽度或起点/终点与图像不匹配
        SearchTimeoutError: 搜索超时
        IOError: 结果图像保存失败
    """
    t0 = time.perf_counter()

    source = load_bitmap(input_path)
    border = config.extraction.border_px
    try:
        bitmap = source.crop_border(border)
    except ValueError as e:
        error_msg = f"外框裁剪失败: {e}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg) from e
    sampler = BitmapSampler(bitmap, config.extraction.wall_threshold)

    start, end = _resolve_endpoints(config, sampler)
    logger.info(f"迷宫尺寸=({sampler.width}, {sampler.height}), 起点={start}, 终点={end}")

    extractor = MazeExtractor(sampler, config.extraction.strategy)
    graph = extractor.extract(anchors=(start, end))

    engine = SearchEngine(
        priority=config.search.priority,
        update_policy=config.search.update_policy,
        timeout_s=config.search.timeout_s,
    )
    result = engine.search(graph, start, end)
    path = reconstruct(result.parents, start, end) if result.found else None

    if path is None:
        logger.warning(f"未找到路径: start={start}, end={end}, 展开节点数={result.expanded}")
    else:
        logger.info(f"路径长度={path_length(path)}, 路径节点数={len(path)}")

    if output_path is not None:
        canvas = ImageCanvas(
            source.pixels,
            offset=(border, border),
            thickness=config.render.line_thickness,
        )
        render_search(
            canvas,
            result,
            path,
            explored_color=config.render.explored_color,
            path_color=config.render.path_color,
        )
        canvas.save(output_path)

    elapsed = time.perf_counter() - t0
    logger.info(f"求解完成，耗时 {elapsed:.3f}s")

    return SolveReport(
        start=start,
        end=end,
        node_count=len(graph),
        expanded=result.expanded,
        found=path is not None,
        path=path,
        path_length=path_length(path),
        elapsed_s=elapsed,
    )


def _prompt(message: str) -> str:
    value = input(message).strip()
    # 去掉拖拽文件时带上的引号
    return value.strip('"').strip("'")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="迷宫图像求解")
    parser.add_argument("--input", "-i", type=str, default=None, help="输入图像路径（缺省时交互输入）")
    parser.add_argument("--output", "-o", type=str, default=None, help="输出图像路径（缺省时交互输入）")
    parser.add_argument("--config", "-c", type=str, default=None, help="YAML 配置文件路径")
    parser.add_argument("--log-level", type=str, default=None, help="日志级别，覆盖配置文件")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """命令行入口，返回进程退出码"""
    args = parse_args(argv)

    try:
        config = load_config(args.config) if args.config else MazeConfig()
    except (FileNotFoundError, yaml.YAMLError, MazeError) as e:
        print(f"配置加载失败: {e}", file=sys.stderr)
        return 1

    SetupLogger(level=(args.log_level or config.logging.level).upper(), log_dir=config.logging.log_dir)

    input_path = args.input or _prompt("输入图像路径: ")
    output_path = args.output or _prompt("输出图像路径: ")

    try:
        report = solve_maze(config, input_path, output_path)
    except (MazeError, OSError) as e:
        logger.error(f"求解失败: {e}")
        print(f"求解失败: {e}", file=sys.stderr)
        return 1

    if report.found:
        print(f"找到路径: 长度={report.path_length}, 展开节点数={report.expanded}, 耗时={report.elapsed_s:.3f}s")
    else:
        print(f"未找到路径: 展开节点数={report.expanded}, 耗时={report.elapsed_s:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
