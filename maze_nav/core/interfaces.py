#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
核心接口定义：定义位图与画布两个外部协作者的抽象接口
"""

from abc import ABC, abstractmethod
from typing import Tuple

Position = Tuple[int, int]  # (x, y)
Color = Tuple[int, int, int]  # BGR


class IBitmap(ABC):
    """位图接口：单通道灰度图（0-255）"""

    @abstractmethod
    def width(self) -> int:
        pass

    @abstractmethod
    def height(self) -> int:
        pass

    @abstractmethod
    def sample(self, x: int, y: int) -> int:
        """
        读取像素亮度

        Args:
            x: 列
            y: 行

        Returns:
            亮度值 0-255，调用方保证坐标在范围内
        """
        pass


class ICanvas(ABC):
    """画布接口：只支持标记单点和画轴对齐线段"""

    @abstractmethod
    def mark(self, position: Position, color: Color) -> None:
        pass

    @abstractmethod
    def draw_line(self, start: Position, end: Position, color: Color) -> None:
        """
        画一条轴对齐线段

        Args:
            start: 起点
            end: 终点，必须与起点共享 x 或 y

        Raises:
            ValueError: 线段不是轴对齐的
        """
        pass
