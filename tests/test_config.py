#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模型与加载器测试
"""

from pathlib import Path

import pytest
import yaml

from maze_nav.common.exceptions import ConfigurationError
from maze_nav.config import MazeConfig, load_config

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "maze_config.yaml"


def test_defaults():
    config = MazeConfig()

    assert config.extraction.strategy == "sparse"
    assert config.extraction.wall_threshold == 150
    assert config.search.priority == "hybrid"
    assert config.search.update_policy == "always"
    assert config.search.start is None
    assert config.render.explored_color == (0, 0, 255)
    assert config.logging.level == "INFO"


def test_shipped_config_loads():
    config = load_config(DEFAULT_CONFIG)
    assert config.extraction.border_px == 2


def test_load_overrides(tmp_path):
    path = tmp_path / "maze.yaml"
    path.write_text(
        "extraction:\n"
        "  strategy: dense\n"
        "search:\n"
        "  priority: astar\n"
        "  start: [1, 2]\n"
        "logging:\n"
        "  level: debug\n"
        "  log_dir: logs\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.extraction.strategy == "dense"
    assert config.search.priority == "astar"
    assert config.search.start == (1, 2)
    assert config.logging.level == "DEBUG"
    assert Path(config.logging.log_dir) == (tmp_path / "logs").resolve()


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == MazeConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_bad_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("search: [unclosed", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_config(path)


@pytest.mark.parametrize("body", [
    "extraction:\n  strategy: diagonal\n",
    "extraction:\n  wall_threshold: 999\n",
    "search:\n  priority: dijkstra\n",
    "search:\n  timeout_s: -1\n",
    "search:\n  start: [-1, 0]\n",
    "render:\n  path_color: [0, 300, 0]\n",
    "- just\n- a list\n",
])
def test_invalid_values(tmp_path, body):
    path = tmp_path / "invalid.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)
