"""Shortest paths on weighted directed graphs.

Vertices are numbered from 0. Unreachable vertices have distance ``math.inf``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

INF = math.inf


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest distances undefined."""


@dataclass(frozen=True)
class Edge:
    """A directed edge from ``src`` to ``dst`` carrying ``weight``."""

    src: int
    dst: int
    weight: float


def _prepare(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, float]]
) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("the number of vertices cannot be negative")
    result = []
    for item in edges:
        edge = item if isinstance(item, Edge) else Edge(*item)
        for end in (edge.src, edge.dst):
            if not 0 <= end < vertex_count:
                raise ValueError(f"edge {edge} names a vertex outside 0..{vertex_count - 1}")
        result.append(edge)
    return result


def _check_source(vertex_count: int, source: int) -> None:
    if not 0 <= source < vertex_count:
        raise ValueError(f"source {source} is not a vertex of the graph")


def _matrix(vertex_count: int, edges: list[Edge]) -> list[list[float]]:
    matrix = [[INF] * vertex_count for _ in range(vertex_count)]
    for i, row in enumerate(matrix):
        row[i] = 0
    for edge in edges:
        matrix[edge.src][edge.dst] = edge.weight
    return matrix


def bellman_ford(
    vertex_count: int,
    edges: Iterable[Edge | tuple[int, int, float]],
    source: int,
) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    Negative weights are allowed; a reachable negative cycle raises
    NegativeCycleError.
    """
    edge_list = _prepare(vertex_count, edges)
    _check_source(vertex_count, source)
    dist = [INF] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count):
        for edge in edge_list:
            if dist[edge.src] != INF and dist[edge.src] + edge.weight < dist[edge.dst]:
                dist[edge.dst] = dist[edge.src] + edge.weight
    for edge in edge_list:
        if dist[edge.src] != INF and dist[edge.src] + edge.weight < dist[edge.dst]:
            raise NegativeCycleError(
                "graph contains a negative weight cycle; shortest distances are not defined"
            )
    return dist


def dijkstra(
    vertex_count: int,
    edges: Iterable[Edge | tuple[int, int, float]],
    source: int,
) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    Weights are expected to be non-negative. When several edges join the same
    pair of vertices, the last one given is used.
    """
    matrix = _matrix(vertex_count, _prepare(vertex_count, edges))
    _check_source(vertex_count, source)
    dist = [INF] * vertex_count
    dist[source] = 0
    visited = [False] * vertex_count
    for _ in range(vertex_count - 1):
        candidates = [v for v in range(vertex_count) if not visited[v] and dist[v] != INF]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        visited[u] = True
        for v, weight in enumerate(matrix[u]):
            if not visited[v] and weight != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def floyd_warshall(
    vertex_count: int,
    edges: Iterable[Edge | tuple[int, int, float]],
) -> list[list[float]]:
    """Return the matrix of shortest distances between every pair of vertices.

    When several edges join the same pair of vertices, the last one given is used.
    """
    dist = _matrix(vertex_count, _prepare(vertex_count, edges))
    for k in range(vertex_count):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == INF:
                continue
            for j, onward in enumerate(through):
                if onward != INF and via + onward < row[j]:
                    row[j] = via + onward
    return dist