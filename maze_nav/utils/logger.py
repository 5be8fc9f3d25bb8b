#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日志工具
"""

import sys
from pathlib import Path
from typing import Optional, Union
from loguru import logger


def SetupLogger(level: str = "INFO", log_dir: Optional[Union[str, Path]] = None):
    """
    配置 loguru：控制台输出，可选按天滚动的文件输出

    Args:
        level: 日志级别
        log_dir: 日志目录，None 时不写文件
    """
    # 移除默认 handler
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        level=level,
        colorize=True
    )

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_path / "maze_nav_{time:YYYY-MM-DD}.log"),
            rotation="00:00",
            retention="7 days",
            level=level,
            encoding="utf-8",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )
        logger.info(f"日志初始化完成，保存到: {log_path}")

    return logger
