#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：节点图模型、搜索引擎、路径回溯
"""

from .map_model import NodeGraph, SearchResult, manhattan, path_length
from .search_engine import SearchEngine, search
from .path_reconstructor import reconstruct

__all__ = [
    'NodeGraph',
    'SearchResult',
    'SearchEngine',
    'manhattan',
    'path_length',
    'reconstruct',
    'search',
]
