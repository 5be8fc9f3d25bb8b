#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理所有魔法数字和配置常量
"""

# =============================
# 图像采样相关常量
# =============================

# 灰度低于该值视为墙
DEFAULT_WALL_THRESHOLD: int = 150

# 迷宫外框宽度（像素），提取前裁掉
DEFAULT_BORDER_PX: int = 0

# =============================
# 搜索相关常量
# =============================

# 四方向移动，顺序固定：左、右、上、下
DIRECTIONS: tuple = ((-1, 0), (1, 0), (0, -1), (0, 1))

PRIORITY_HYBRID: str = "hybrid"
PRIORITY_ASTAR: str = "astar"
PRIORITY_GREEDY: str = "greedy"

UPDATE_ALWAYS: str = "always"
UPDATE_IMPROVE: str = "improve"

STRATEGY_SPARSE: str = "sparse"
STRATEGY_DENSE: str = "dense"

# =============================
# 渲染相关常量（BGR）
# =============================

COLOR_EXPLORED: tuple = (0, 0, 255)
COLOR_PATH: tuple = (0, 255, 0)
