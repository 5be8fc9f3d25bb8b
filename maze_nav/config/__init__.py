#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    MazeConfig,
    ExtractionConfig,
    SearchConfig,
    RenderConfig,
    LoggingConfig,
)
from .loader import load_config

__all__ = [
    'MazeConfig',
    'ExtractionConfig',
    'SearchConfig',
    'RenderConfig',
    'LoggingConfig',
    'load_config'
]
