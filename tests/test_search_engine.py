#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
搜索引擎 + 路径回溯的端到端测试
"""

import pytest

from maze_nav.common.exceptions import SearchTimeoutError
from maze_nav.core.maze_extractor import MazeExtractor, extract_dense, extract_sparse, find_last_open, find_seed
from maze_nav.path_planner import search_engine
from maze_nav.path_planner.map_model import manhattan, path_length
from maze_nav.path_planner.path_reconstructor import reconstruct
from maze_nav.path_planner.search_engine import SearchEngine, search
from tests.conftest import ENCLOSED, GAP_ROOM, OPEN_ROOM
from tests.test_maze_extractor import _random_sampler

START = (0, 2)
END = (4, 2)
SQUARE = ["...", "...", "..."]


def _solve(sampler, strategy, start, end, **kwargs):
    graph = MazeExtractor(sampler, strategy).extract(anchors=(start, end))
    result = search(graph, start, end, **kwargs)
    return graph, result, reconstruct(result.parents, start, end)


@pytest.mark.parametrize("strategy", ["dense", "sparse"])
def test_open_room_path_is_manhattan(make_sampler, strategy):
    _, result, path = _solve(make_sampler(OPEN_ROOM), strategy, START, END)

    assert result.found
    assert END in result.closed
    assert path[0] == START and path[-1] == END
    assert path_length(path) == manhattan(START, END)


@pytest.mark.parametrize("strategy", ["dense", "sparse"])
def test_gap_room_routes_through_gap(make_sampler, strategy):
    _, result, path = _solve(make_sampler(GAP_ROOM), strategy, START, END)

    assert result.found
    # 从第 2 行绕到第 1 行的缺口，来回各多走 1 格
    assert path_length(path) == manhattan(START, END) + 2 * (2 - 1)
    if strategy == "dense":
        assert (2, 1) in path
    else:
        assert (1, 1) in path and (3, 1) in path


@pytest.mark.parametrize("strategy", ["dense", "sparse"])
def test_path_steps_are_axis_aligned_and_open(make_sampler, strategy):
    sampler = make_sampler(GAP_ROOM)
    _, _, path = _solve(sampler, strategy, START, END)

    for a, b in zip(path, path[1:]):
        assert a[0] == b[0] or a[1] == b[1]
        assert sampler.is_open(*b)


def test_single_pixel_maze(make_sampler):
    graph = extract_sparse(make_sampler(["."]))
    result = search(graph, (0, 0), (0, 0))

    assert result.found
    assert result.expanded == 1
    assert reconstruct(result.parents, (0, 0), (0, 0)) == [(0, 0)]


@pytest.mark.parametrize("strategy", ["dense", "sparse"])
def test_start_equals_end(make_sampler, strategy):
    _, result, path = _solve(make_sampler(OPEN_ROOM), strategy, (2, 2), (2, 2))

    assert result.found
    assert result.closed == {(2, 2)}
    assert path == [(2, 2)]


@pytest.mark.parametrize("strategy", ["dense", "sparse"])
def test_unreachable_end(make_sampler, strategy):
    _, result, path = _solve(make_sampler(ENCLOSED), strategy, (1, 1), (3, 1))

    assert not result.found
    assert result.closed == {(1, 1)}
    assert path is None


def test_unreachable_end_exhausts_component(make_sampler):
    graph = extract_dense(make_sampler(OPEN_ROOM))
    start = START
    result = search(graph, start, (-5, -5))

    assert not result.found
    # 起点所在连通域被完整展开
    assert len(result.closed) == 11
    assert reconstruct(result.parents, start, (-5, -5)) is None


@pytest.mark.parametrize("strategy", ["dense", "sparse"])
def test_search_is_deterministic(make_sampler, strategy):
    graph = MazeExtractor(make_sampler(GAP_ROOM), strategy).extract(anchors=(START, END))

    first = search(graph, START, END)
    second = search(graph, START, END)

    assert first.closed == second.closed
    assert first.expansion_order == second.expansion_order
    assert first.parents == second.parents
    assert first.costs == second.costs


@pytest.mark.parametrize("priority", ["hybrid", "astar", "greedy"])
@pytest.mark.parametrize("update_policy", ["always", "improve"])
def test_costs_follow_parents(priority, update_policy):
    sampler = _random_sampler(5)
    start, end = find_seed(sampler), find_last_open(sampler)
    graph = extract_sparse(sampler, anchors=(start, end))

    result = search(graph, start, end, priority=priority, update_policy=update_policy)

    assert result.parents[start] is None
    assert result.costs[start] == 0
    for position, parent in result.parents.items():
        if parent is None:
            continue
        assert parent in result.closed
        assert result.costs[position] == result.costs[parent] + manhattan(position, parent)


@pytest.mark.parametrize("seed", [2, 5, 9])
def test_astar_matches_between_strategies(seed):
    sampler = _random_sampler(seed)
    start, end = find_seed(sampler), find_last_open(sampler)

    dense = extract_dense(sampler)
    sparse = extract_sparse(sampler, anchors=(start, end))
    dense_result = search(dense, start, end, priority="astar", update_policy="improve")
    sparse_result = search(sparse, start, end, priority="astar", update_policy="improve")

    assert dense_result.found == sparse_result.found
    if dense_result.found:
        dense_path = reconstruct(dense_result.parents, start, end)
        sparse_path = reconstruct(sparse_result.parents, start, end)
        assert path_length(dense_path) == path_length(sparse_path)
        assert dense_result.costs[end] == path_length(dense_path)

        # hybrid 不保证最短，但不会比最短更短
        hybrid = search(sparse, start, end)
        assert path_length(reconstruct(hybrid.parents, start, end)) >= path_length(sparse_path)


def test_invalid_engine_arguments():
    with pytest.raises(ValueError):
        SearchEngine(priority="dijkstra")
    with pytest.raises(ValueError):
        SearchEngine(update_policy="never")
    with pytest.raises(ValueError):
        SearchEngine(timeout_s=0)


def test_timeout_raises(make_sampler, monkeypatch):
    graph = extract_dense(make_sampler(OPEN_ROOM))
    ticks = iter(range(0, 10_000, 100))
    monkeypatch.setattr(search_engine, "_clock", lambda: next(ticks))

    with pytest.raises(SearchTimeoutError):
        SearchEngine(timeout_s=1.0).search(graph, START, END)


def test_start_missing_from_graph(make_sampler):
    graph = extract_dense(make_sampler(OPEN_ROOM))
    result = search(graph, (0, 0), END)

    assert not result.found
    assert result.closed == {(0, 0)}


def test_hybrid_priority_expansion_order(make_sampler):
    graph = extract_dense(make_sampler(SQUARE))

    hybrid = search(graph, (0, 0), (2, 2))
    astar = search(graph, (0, 0), (2, 2), priority="astar")

    # min(g, h)：(2,0) 之后 h 降为 1，直接沿右边走到终点
    assert hybrid.expansion_order == [(0, 0), (1, 0), (0, 1), (2, 0), (2, 1), (2, 2)]
    assert reconstruct(hybrid.parents, (0, 0), (2, 2)) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]
    assert astar.expansion_order == [
        (0, 0), (1, 0), (0, 1), (2, 0), (1, 1), (0, 2), (2, 1), (1, 2), (2, 2),
    ]
    assert hybrid.expansion_order != astar.expansion_order


def test_always_overwrites_with_worse_cost(make_sampler):
    graph = extract_dense(make_sampler(SQUARE))

    always = search(graph, (0, 0), (2, 2))
    improve = search(graph, (0, 0), (2, 2), update_policy="improve")

    # (1,1) 先以代价 2 被发现，展开 (2,1) 时又以代价 4 被发现，且始终未展开
    assert (1, 1) not in always.closed
    assert always.costs[(1, 1)] == 4
    assert always.parents[(1, 1)] == (2, 1)
    assert improve.costs[(1, 1)] == 2
    assert improve.parents[(1, 1)] == (1, 0)
    assert improve.expansion_order == always.expansion_order
