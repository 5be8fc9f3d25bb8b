#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从YAML文件加载配置并使用Pydantic验证。
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union
from loguru import logger
from pydantic import ValidationError

from maze_nav.common.exceptions import ConfigurationError
from maze_nav.config.models import MazeConfig


def load_config(config_path: Union[str, Path], base_dir: Optional[Path] = None) -> MazeConfig:
    """
    从YAML文件加载配置

    Args:
        config_path: 配置文件路径
        base_dir: 用于解析相对路径（log_dir）的目录，默认为配置文件所在目录

    Returns:
        验证后的MazeConfig对象

    Raises:
        FileNotFoundError: 配置文件不存在
        yaml.YAMLError: YAML格式错误
        ConfigurationError: 配置验证失败
    """
    config_path = Path(config_path)
    base_dir = Path(base_dir).resolve() if base_dir is not None else config_path.resolve().parent

    # 检查文件是否存在
    if not config_path.exists():
        error_msg = f"配置文件不存在: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    # 加载YAML文件
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"YAML格式错误: {e}"
        logger.error(error_msg)
        raise yaml.YAMLError(error_msg) from e

    # 空文件使用全部默认值
    if raw_config is None:
        logger.warning(f"配置文件为空，使用默认配置: {config_path}")
        raw_config = {}

    if not isinstance(raw_config, dict):
        error_msg = f"配置文件顶层必须是映射: {config_path}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    _apply_relative_paths(raw_config, base_dir)

    # 使用Pydantic验证配置
    try:
        config = MazeConfig(**raw_config)
    except ValidationError as e:
        # 输出详细的验证错误信息
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        error_msg = f"配置验证失败:\n{e}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg) from e

    logger.info(f"配置加载成功: {config_path}")
    return config


def _resolve_path(value: Optional[str], base_dir: Path) -> Optional[str]:
    """解析相对路径为绝对路径"""
    if value is None:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path.resolve())


def _apply_relative_paths(raw_config: Dict[str, Any], base_dir: Path) -> None:
    """将配置中的相对路径字段转换为绝对路径"""
    logging_cfg = raw_config.get('logging')
    if isinstance(logging_cfg, dict) and logging_cfg.get('log_dir'):
        logging_cfg['log_dir'] = _resolve_path(logging_cfg['log_dir'], base_dir)
