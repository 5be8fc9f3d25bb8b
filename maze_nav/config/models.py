#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
迷宫求解配置模型

使用Pydantic定义类型安全的配置模型，所有字段都有默认值，MazeConfig() 即可直接使用。
"""

from typing import Optional, Tuple
from pydantic import BaseModel, Field, field_validator

from maze_nav.common.constants import (
    COLOR_EXPLORED,
    COLOR_PATH,
    DEFAULT_BORDER_PX,
    DEFAULT_WALL_THRESHOLD,
    PRIORITY_ASTAR,
    PRIORITY_GREEDY,
    PRIORITY_HYBRID,
    STRATEGY_DENSE,
    STRATEGY_SPARSE,
    UPDATE_ALWAYS,
    UPDATE_IMPROVE,
)


class ExtractionConfig(BaseModel):
    """迷宫提取配置"""
    strategy: str = Field(STRATEGY_SPARSE, description="提取策略: 'sparse' 或 'dense'")
    wall_threshold: int = Field(DEFAULT_WALL_THRESHOLD, description="亮度低于该值视为墙")
    border_px: int = Field(DEFAULT_BORDER_PX, description="提取前裁掉的外框宽度（像素）")

    @field_validator('strategy')
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        """验证提取策略"""
        if v not in (STRATEGY_SPARSE, STRATEGY_DENSE):
            raise ValueError(f"提取策略必须是 'sparse' 或 'dense': {v}")
        return v

    @field_validator('wall_threshold')
    @classmethod
    def validate_wall_threshold(cls, v: int) -> int:
        """验证阈值范围"""
        if not 0 <= v <= 256:
            raise ValueError(f"墙阈值必须在0-256之间: {v}")
        return v

    @field_validator('border_px')
    @classmethod
    def validate_border_px(cls, v: int) -> int:
        """验证外框宽度"""
        if v < 0:
            raise ValueError(f"外框宽度不能为负数: {v}")
        return v


class SearchConfig(BaseModel):
    """搜索配置"""
    priority: str = Field(PRIORITY_HYBRID, description="优先级函数: 'hybrid'=min(g,h), 'astar'=g+h, 'greedy'=h")
    update_policy: str = Field(UPDATE_ALWAYS, description="父节点更新策略: 'always' 或 'improve'")
    timeout_s: Optional[float] = Field(None, description="搜索时限（秒），为空表示不限")
    start: Optional[Tuple[int, int]] = Field(None, description="起点 (x, y)，为空时取第一个可通行像素")
    end: Optional[Tuple[int, int]] = Field(None, description="终点 (x, y)，为空时取最后一个可通行像素")

    @field_validator('priority')
    @classmethod
    def validate_priority(cls, v: str) -> str:
        """验证优先级函数"""
        if v not in (PRIORITY_HYBRID, PRIORITY_ASTAR, PRIORITY_GREEDY):
            raise ValueError(f"未知的优先级函数: {v}")
        return v

    @field_validator('update_policy')
    @classmethod
    def validate_update_policy(cls, v: str) -> str:
        """验证更新策略"""
        if v not in (UPDATE_ALWAYS, UPDATE_IMPROVE):
            raise ValueError(f"未知的更新策略: {v}")
        return v

    @field_validator('timeout_s')
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        """验证时限"""
        if v is not None and v <= 0:
            raise ValueError(f"搜索时限必须大于0: {v}")
        return v

    @field_validator('start', 'end')
    @classmethod
    def validate_position(cls, v: Optional[Tuple[int, int]]) -> Optional[Tuple[int, int]]:
        """验证坐标非负"""
        if v is not None and (v[0] < 0 or v[1] < 0):
            raise ValueError(f"坐标不能为负数: {v}")
        return v


class RenderConfig(BaseModel):
    """渲染配置（颜色为 BGR）"""
    explored_color: Tuple[int, int, int] = Field(COLOR_EXPLORED, description="已展开节点颜色")
    path_color: Tuple[int, int, int] = Field(COLOR_PATH, description="路径颜色")
    line_thickness: int = Field(1, description="路径线宽")

    @field_validator('explored_color', 'path_color')
    @classmethod
    def validate_color(cls, v: Tuple[int, int, int]) -> Tuple[int, int, int]:
        """验证颜色分量"""
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"颜色分量必须在0-255之间: {v}")
        return v

    @field_validator('line_thickness')
    @classmethod
    def validate_line_thickness(cls, v: int) -> int:
        """验证线宽"""
        if v <= 0:
            raise ValueError(f"线宽必须大于0: {v}")
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录，为空时只输出到控制台")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        v = v.upper()
        if v not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"未知的日志级别: {v}")
        return v


class MazeConfig(BaseModel):
    """迷宫求解总配置"""
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig, description="提取配置")
    search: SearchConfig = Field(default_factory=SearchConfig, description="搜索配置")
    render: RenderConfig = Field(default_factory=RenderConfig, description="渲染配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")
