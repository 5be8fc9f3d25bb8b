#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试公共工具：用字符画构造位图

    '#' = 墙 (0), 其他字符 = 可通行 (255)
"""

from typing import List

import numpy as np
import pytest
from loguru import logger

from maze_nav.core.bitmap_sampler import BitmapSampler, GrayBitmap


def ascii_to_pixels(rows: List[str]) -> np.ndarray:
    height = len(rows)
    width = len(rows[0])
    pixels = np.full((height, width), 255, dtype=np.uint8)
    for y, row in enumerate(rows):
        assert len(row) == width, "每行长度必须一致"
        for x, ch in enumerate(row):
            if ch == '#':
                pixels[y, x] = 0
    return pixels


@pytest.fixture(autouse=True)
def _reset_logger():
    """main() 会重新配置 loguru 的输出，测试结束后清掉"""
    yield
    logger.remove()


@pytest.fixture
def make_sampler():
    def _make(rows: List[str], threshold: int = 150) -> BitmapSampler:
        return BitmapSampler(GrayBitmap(ascii_to_pixels(rows)), threshold)
    return _make


# 5x5：四周是墙，(0,2) 和 (4,2) 开口，内部全空
OPEN_ROOM = [
    "#####",
    "#...#",
    ".....",
    "#...#",
    "#####",
]

# 同上，但 x=2 是一整列墙，只在 y=1 留一个缺口
GAP_ROOM = [
    "#####",
    "#...#",
    "..#..",
    "#.#.#",
    "#####",
]

# 右侧小格完全被墙包围
ENCLOSED = [
    "#####",
    "#.#.#",
    "#####",
]
