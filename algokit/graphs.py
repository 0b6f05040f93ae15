"""Graphs given as adjacency matrices: formatting and traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence


def format_matrix(graph: Sequence[Sequence[int]]) -> str:
    """Return the matrix as text, one row per line, entries separated by spaces."""
    return "\n".join(" ".join(str(entry) for entry in row) for row in graph)


def _validated(graph: Sequence[Sequence[int]], start: int) -> list[list[int]]:
    matrix = [list(row) for row in graph]
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"start vertex {start} out of range for {size} vertices")
    return matrix


def _neighbours(matrix: list[list[int]], vertex: int) -> Iterator[int]:
    return (i for i, edge in enumerate(matrix[vertex]) if edge == 1)


def bfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices in breadth-first order from ``start``.

    An edge from u to v exists where ``graph[u][v] == 1``.
    """
    matrix = _validated(graph, start)
    visited = {start}
    order = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in _neighbours(matrix, vertex):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices in depth-first order from ``start``, lowest neighbour first."""
    matrix = _validated(graph, start)
    visited = {start}
    order = [start]
    stack = [_neighbours(matrix, start)]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(_neighbours(matrix, neighbour))
                break
        else:
            stack.pop()
    return order