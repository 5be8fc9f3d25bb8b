#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义迷宫求解模块的专用异常
"""


class MazeError(Exception):
    """迷宫模块基础异常类"""
    pass


class ImageDecodeError(MazeError):
    """输入图像不存在或无法解码"""
    pass


class EmptyMazeError(MazeError):
    """图像中没有任何可通行像素"""
    pass


class SearchTimeoutError(MazeError):
    """搜索超过了调用方给定的时限（与“无路径”不同）"""
    pass


class ConfigurationError(MazeError):
    """配置错误异常"""
    pass
