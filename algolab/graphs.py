"""Graph algorithms: shortest paths, components, traversals, cycles, MST, grids."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Sequence

UNREACHABLE = math.inf

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def dijkstra(graph: Sequence[Sequence[int]], src: int, dst: int):
    """Shortest distance from ``src`` to ``dst`` in an adjacency matrix.

    A zero entry means there is no edge. Returns ``UNREACHABLE`` (infinity)
    when ``dst`` cannot be reached.
    """
    n = len(graph)
    dist = [UNREACHABLE] * n
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in enumerate(graph[u]):
            if weight and d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(heap, (dist[v], v))
    return dist[dst]


def number_of_friend_groups(graph: Sequence[Sequence[int]]) -> int:
    """Number of connected components of a graph given as adjacency lists."""
    parent = list(range(len(graph)))

    def find(x: int) -> int:
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    for i, neighbours in enumerate(graph):
        for j in neighbours:
            if i != j:
                parent[find(i)] = find(j)

    return len({find(i) for i in range(len(graph))})


class Graph:
    """Undirected graph on vertices 0..n-1, stored as adjacency lists."""

    def __init__(self, vertices: int):
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._adj):
            raise IndexError(f"vertex {v} outside 0..{len(self._adj) - 1}")

    def add_edge(self, v: int, w: int) -> None:
        """Connect ``v`` and ``w`` in both directions."""
        self._check(v)
        self._check(w)
        self._adj[v].append(w)
        self._adj[w].append(v)

    def adjacency(self, v: int) -> list[int]:
        """Neighbours of ``v`` in the order the edges were added."""
        self._check(v)
        return list(self._adj[v])

    def bfs(self, start: int) -> list[int]:
        """Vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = [False] * len(self._adj)
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            v = queue.popleft()
            order.append(v)
            for neighbour in self._adj[v]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Vertices in depth-first order from ``start``, using an explicit stack.

        Neighbours are pushed in reverse so the first-added one is explored first.
        """
        self._check(start)
        visited = [False] * len(self._adj)
        stack = [start]
        order: list[int] = []
        while stack:
            v = stack.pop()
            if not visited[v]:
                visited[v] = True
                order.append(v)
            for neighbour in reversed(self._adj[v]):
                if not visited[neighbour]:
                    stack.append(neighbour)
        return order


class DirectedGraph:
    """Directed graph on vertices 0..n-1."""

    def __init__(self, vertices: int):
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from ``v`` to ``w``."""
        for vertex in (v, w):
            if not 0 <= vertex < len(self._adj):
                raise IndexError(f"vertex {vertex} outside 0..{len(self._adj) - 1}")
        self._adj[v].append(w)

    def is_cyclic(self) -> bool:
        """Whether the graph contains a directed cycle."""
        n = len(self._adj)
        visited = [False] * n
        on_stack = [False] * n
        for start in range(n):
            if visited[start]:
                continue
            visited[start] = True
            on_stack[start] = True
            stack = [(start, iter(self._adj[start]))]
            while stack:
                v, neighbours = stack[-1]
                for w in neighbours:
                    if on_stack[w]:
                        return True
                    if not visited[w]:
                        visited[w] = True
                        on_stack[w] = True
                        stack.append((w, iter(self._adj[w])))
                        break
                else:
                    on_stack[v] = False
                    stack.pop()
        return False


class WeightedGraph:
    """Undirected weighted graph kept as an edge list."""

    def __init__(self, vertices: int):
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self._edges: list[tuple[int, int, int]] = []

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Add an edge between ``u`` and ``v`` with weight ``w``."""
        for vertex in (u, v):
            if not 0 <= vertex < self.vertices:
                raise IndexError(f"vertex {vertex} outside 0..{self.vertices - 1}")
        self._edges.append((w, u, v))

    def kruskal_mst(self) -> int:
        """Total weight of a minimum spanning forest (Kruskal's algorithm)."""
        parent = list(range(self.vertices))

        def find(x: int) -> int:
            root = x
            while parent[root] != root:
                root = parent[root]
            while parent[x] != root:
                parent[x], x = root, parent[x]
            return root

        total = 0
        for weight, u, v in sorted(self._edges):
            root_u, root_v = find(u), find(v)
            if root_u != root_v:
                total += weight
                parent[root_u] = root_v
        return total


def on_the_sand(matrix: Sequence[Sequence[int]]) -> list[list]:
    """Distance of every cell to the nearest zero cell, moving in four directions.

    Cells that cannot reach any zero hold ``UNREACHABLE``.
    """
    if not matrix:
        return []
    rows, cols = len(matrix), len(matrix[0])
    dist: list[list] = [[UNREACHABLE] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for i, row in enumerate(matrix):
        for j, cell in enumerate(row):
            if cell == 0:
                dist[i][j] = 0
                queue.append((i, j))
    while queue:
        i, j = queue.popleft()
        for di, dj in _DIRECTIONS:
            ni, nj = i + di, j + dj
            if 0 <= ni < rows and 0 <= nj < cols and dist[ni][nj] > dist[i][j] + 1:
                dist[ni][nj] = dist[i][j] + 1
                queue.append((ni, nj))
    return dist