#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
maze_nav 主包
迷宫图像 → 节点图 → 最优先搜索 → 路径渲染
"""

__version__ = "0.1.0"

__all__ = []
