#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
位图采样模块

负责加载灰度图、裁掉外框，以及把像素坐标分类为 墙 / 可通行 / 越界。
"""

from enum import Enum
from pathlib import Path
from typing import Union

import cv2
import numpy as np
from loguru import logger

from maze_nav.common.constants import DEFAULT_WALL_THRESHOLD
from maze_nav.common.exceptions import ImageDecodeError
from maze_nav.core.interfaces import IBitmap


class BlockState(Enum):
    """像素分类结果"""
    WALL = 0
    OPEN = 1
    OUT_OF_BOUNDS = 2


class GrayBitmap(IBitmap):
    """基于 numpy 数组的灰度位图，数组形状为 (height, width)"""

    def __init__(self, pixels: np.ndarray):
        if pixels is None or pixels.ndim != 2:
            raise ValueError("pixels必须是二维灰度数组")
        self.pixels_ = pixels

    @property
    def pixels(self) -> np.ndarray:
        return self.pixels_

    def width(self) -> int:
        return int(self.pixels_.shape[1])

    def height(self) -> int:
        return int(self.pixels_.shape[0])

    def sample(self, x: int, y: int) -> int:
        return int(self.pixels_[y, x])

    def crop_border(self, border_px: int) -> "GrayBitmap":
        """
        去掉四周 border_px 像素宽的外框

        Args:
            border_px: 外框宽度，0 表示不裁剪

        Returns:
            新的 GrayBitmap（共享底层数据）
        """
        if border_px < 0:
            raise ValueError(f"border_px不能为负数: {border_px}")
        if border_px == 0:
            return self
        h, w = self.pixels_.shape
        if 2 * border_px >= w or 2 * border_px >= h:
            raise ValueError(f"外框过宽: border_px={border_px}, size=({w}, {h})")
        return GrayBitmap(self.pixels_[border_px:h - border_px, border_px:w - border_px])


def load_bitmap(image_path: Union[str, Path]) -> GrayBitmap:
    """
    读取图像文件并转为灰度位图

    Args:
        image_path: 图像路径

    Returns:
        GrayBitmap

    Raises:
        ImageDecodeError: 文件不存在或无法解码
    """
    path = Path(image_path)
    if not path.exists():
        error_msg = f"图像文件不存在: {path}"
        logger.error(error_msg)
        raise ImageDecodeError(error_msg)

    pixels = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    if pixels is None:
        error_msg = f"无法解码图像文件: {path}"
        logger.error(error_msg)
        raise ImageDecodeError(error_msg)

    logger.info(f"图像加载成功: {path}, 尺寸=({pixels.shape[1]}, {pixels.shape[0]})")
    return GrayBitmap(pixels)


def classify(bitmap: IBitmap, x: int, y: int, threshold: int = DEFAULT_WALL_THRESHOLD) -> BlockState:
    """
    像素分类（纯函数，越界不抛异常）

    Args:
        bitmap: 位图
        x: 列
        y: 行
        threshold: 亮度阈值，低于该值为墙

    Returns:
        BlockState
    """
    if x < 0 or y < 0 or x >= bitmap.width() or y >= bitmap.height():
        return BlockState.OUT_OF_BOUNDS
    if bitmap.sample(x, y) < threshold:
        return BlockState.WALL
    return BlockState.OPEN


class BitmapSampler:
    """绑定了阈值的采样器，供提取器使用"""

    def __init__(self, bitmap: IBitmap, threshold: int = DEFAULT_WALL_THRESHOLD):
        if not 0 <= threshold <= 256:
            raise ValueError(f"threshold必须在0-256之间: {threshold}")
        self.bitmap_ = bitmap
        self.threshold_ = threshold

    @property
    def width(self) -> int:
        return self.bitmap_.width()

    @property
    def height(self) -> int:
        return self.bitmap_.height()

    def classify(self, x: int, y: int) -> BlockState:
        return classify(self.bitmap_, x, y, self.threshold_)

    def is_open(self, x: int, y: int) -> bool:
        return self.classify(x, y) is BlockState.OPEN
