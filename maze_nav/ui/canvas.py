#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
可视化：把搜索展开区域和最终路径画回图像
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

import cv2
import numpy as np
from loguru import logger

from maze_nav.common.constants import COLOR_EXPLORED, COLOR_PATH
from maze_nav.core.interfaces import Color, ICanvas, Position
from maze_nav.path_planner.map_model import SearchResult


class ImageCanvas(ICanvas):
    """基于 OpenCV 的画布（BGR）"""

    def __init__(self, image: np.ndarray, offset: Tuple[int, int] = (0, 0), thickness: int = 1):
        """
        初始化画布

        Args:
            image: 源图像，灰度或 BGR，内部复制一份
            offset: 节点坐标到图像坐标的偏移（裁掉的外框宽度）
            thickness: 线宽
        """
        if image.ndim == 2:
            self.image_ = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        else:
            self.image_ = image.copy()
        self.offset_ = offset
        self.thickness_ = thickness

    @property
    def image(self) -> np.ndarray:
        return self.image_

    def _to_image(self, position: Position) -> Tuple[int, int]:
        return (int(position[0] + self.offset_[0]), int(position[1] + self.offset_[1]))

    def mark(self, position: Position, color: Color) -> None:
        x, y = self._to_image(position)
        h, w = self.image_.shape[:2]
        if 0 <= x < w and 0 <= y < h:
            self.image_[y, x] = color

    def draw_line(self, start: Position, end: Position, color: Color) -> None:
        if start[0] != end[0] and start[1] != end[1]:
            raise ValueError(f"只支持轴对齐线段: {start} -> {end}")
        if self.thickness_ <= 1:
            # 逐像素写入，避免抗锯齿/端点扩散
            x0, y0 = self._to_image(start)
            x1, y1 = self._to_image(end)
            self.image_[min(y0, y1):max(y0, y1) + 1, min(x0, x1):max(x0, x1) + 1] = color
            return
        cv2.line(self.image_, self._to_image(start), self._to_image(end), color, self.thickness_)

    def save(self, output_path: Union[str, Path]) -> None:
        path = Path(output_path)
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        try:
            ok = cv2.imwrite(str(path), self.image_)
        except cv2.error as e:
            raise IOError(f"保存图像失败: {path}, {e}") from e
        if not ok:
            raise IOError(f"保存图像失败: {path}")
        logger.info(f"结果图像已保存: {path}")


def render_search(
    canvas: ICanvas,
    result: SearchResult,
    path: Optional[List[Position]],
    explored_color: Color = COLOR_EXPLORED,
    path_color: Color = COLOR_PATH,
) -> None:
    """
    渲染搜索结果：先标记所有已展开节点，再连接路径

    Args:
        canvas: 画布
        result: 搜索结果
        path: 回溯得到的路径，None 时只画展开区域
        explored_color: 展开区域颜色
        path_color: 路径颜色
    """
    for position in result.expansion_order:
        canvas.mark(position, explored_color)

    if not path:
        return

    if len(path) == 1:
        canvas.mark(path[0], path_color)
        return

    for i in range(1, len(path)):
        canvas.draw_line(path[i - 1], path[i], path_color)
