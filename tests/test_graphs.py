import math
import random

import pytest

from algokit.graphs import (
    Edge,
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    floyd_warshall,
)


def _random_graph(seed, n=8, count=20, low=0, high=20):
    rng = random.Random(seed)
    pairs = [(u, v) for u in range(n) for v in range(n) if u != v]
    return [Edge(u, v, rng.randint(low, high)) for u, v in rng.sample(pairs, count)]


def test_shortcut_through_cheaper_path():
    edges = [Edge(0, 1, 4), Edge(0, 2, 1), Edge(2, 1, 2)]
    assert dijkstra(3, edges, 0) == [0, 3, 1]
    assert bellman_ford(3, edges, 0) == [0, 3, 1]


def test_chain_of_unit_edges():
    n = 6
    edges = [(i, i + 1, 1) for i in range(n - 1)]
    expected = list(range(n))
    assert bellman_ford(n, edges, 0) == expected
    assert dijkstra(n, edges, 0) == expected
    assert floyd_warshall(n, edges)[0] == expected


def test_unreachable_vertices_are_infinite():
    edges = [Edge(0, 1, 2)]
    for result in (bellman_ford(3, edges, 0), dijkstra(3, edges, 0), floyd_warshall(3, edges)[0]):
        assert result[2] == math.inf
        assert result[0] == 0


@pytest.mark.parametrize("seed", range(6))
def test_algorithms_agree_on_non_negative_graphs(seed):
    n = 8
    edges = _random_graph(seed, n=n)
    matrix = floyd_warshall(n, edges)
    for source in range(n):
        expected = bellman_ford(n, edges, source)
        assert dijkstra(n, edges, source) == expected
        assert matrix[source] == expected


@pytest.mark.parametrize("seed", range(4))
def test_floyd_warshall_triangle_inequality(seed):
    n = 7
    matrix = floyd_warshall(n, _random_graph(seed, n=n, count=15))
    assert all(matrix[i][i] == 0 for i in range(n))
    for i in range(n):
        for j in range(n):
            for k in range(n):
                assert matrix[i][j] <= matrix[i][k] + matrix[k][j]


def test_negative_edge_without_cycle():
    n = 4
    edges = [Edge(0, 1, 5), Edge(1, 2, -3), Edge(0, 2, 4), Edge(2, 3, 1)]
    assert bellman_ford(n, edges, 0) == floyd_warshall(n, edges)[0]


def test_negative_cycle_detected():
    edges = [Edge(0, 1, 1), Edge(1, 2, -2), Edge(2, 0, -1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, edges, 0)


def test_negative_cycle_error_is_value_error():
    with pytest.raises(ValueError):
        bellman_ford(2, [(0, 1, -1), (1, 0, -1)], 0)


def test_tuples_and_edges_are_equivalent():
    edges = _random_graph(11, n=5, count=8)
    tuples = [(e.src, e.dst, e.weight) for e in edges]
    assert dijkstra(5, tuples, 0) == dijkstra(5, edges, 0)


def test_later_parallel_edge_wins_in_matrix_algorithms():
    edges = [Edge(0, 1, 2), Edge(0, 1, 9)]
    assert dijkstra(2, edges, 0)[1] == edges[-1].weight
    assert floyd_warshall(2, edges)[0][1] == edges[-1].weight
    assert bellman_ford(2, edges, 0)[1] == edges[0].weight


@pytest.mark.parametrize("func", [bellman_ford, dijkstra])
def test_source_out_of_range(func):
    with pytest.raises(ValueError):
        func(3, [], 3)


@pytest.mark.parametrize("func", [bellman_ford, dijkstra])
def test_edge_out_of_range(func):
    with pytest.raises(ValueError):
        func(2, [Edge(0, 5, 1)], 0)


def test_floyd_warshall_edge_out_of_range():
    with pytest.raises(ValueError):
        floyd_warshall(2, [(-1, 0, 1)])


def test_floyd_warshall_empty_graph():
    assert floyd_warshall(0, []) == []