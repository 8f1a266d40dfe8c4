"""Graph algorithms over a graph with nodes numbered from 1.

Traversals, shortest paths, spanning trees, connectivity, Eulerian paths and
a bitmask travelling-salesman solver.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from itertools import count
from typing import Iterator, Mapping, Optional, Sequence

__all__ = ["INF", "Graph", "reconstruct_path", "tsp_table", "tsp_path"]

INF = math.inf


class Graph:
    """A weighted graph on nodes ``1 .. num_nodes``.

    Edges are kept in the order they are added; in an undirected graph every
    edge can be walked both ways.
    """

    def __init__(self, num_nodes: int, directed: bool = False) -> None:
        if num_nodes < 0:
            raise ValueError("num_nodes must not be negative")
        self.num_nodes = num_nodes
        self.directed = directed
        self._edges: list[tuple[int, int, float]] = []
        self._adj: dict[int, list[tuple[int, float]]] = {n: [] for n in self.nodes}

    @property
    def nodes(self) -> range:
        return range(1, self.num_nodes + 1)

    def _check_node(self, node: int) -> None:
        if node not in self.nodes:
            raise ValueError(f"node {node} is not in 1..{self.num_nodes}")

    def add_edge(self, u: int, v: int, weight: float = 1) -> None:
        """Add an edge from ``u`` to ``v`` (both ways if undirected)."""
        self._check_node(u)
        self._check_node(v)
        self._edges.append((u, v, weight))
        self._adj[u].append((v, weight))
        if not self.directed:
            self._adj[v].append((u, weight))

    def _neighbours(self, node: int) -> Iterator[int]:
        return (child for child, _ in self._adj[node])

    def _arcs(self) -> Iterator[tuple[int, int, float]]:
        for u, v, w in self._edges:
            yield u, v, w
            if not self.directed:
                yield v, u, w

    def articulation_points(self) -> list[int]:
        """Nodes whose removal disconnects their component, ascending."""
        ids: dict[int, int] = {}
        low: dict[int, int] = {}
        found: set[int] = set()

        def visit(cur: int, parent: Optional[int], depth: int) -> int:
            ids[cur] = low[cur] = depth
            children = 0
            for child in self._neighbours(cur):
                if child == parent:
                    continue
                if child not in ids:
                    children += 1
                    visit(child, cur, depth + 1)
                    low[cur] = min(low[cur], low[child])
                    if ids[cur] <= low[child]:
                        found.add(cur)
                else:
                    low[cur] = min(low[cur], ids[child])
            return children

        for root in self.nodes:
            if root in ids:
                continue
            if visit(root, None, 0) > 1:
                found.add(root)
            else:
                found.discard(root)
        return sorted(found)

    def bellman_ford(self, start: int) -> dict[int, float]:
        """Distances from ``start``; ``-inf`` where a negative cycle reaches."""
        self._check_node(start)
        dist = {n: INF for n in self.nodes}
        dist[start] = 0
        arcs = list(self._arcs())
        rounds = range(self.num_nodes - 1)
        for _ in rounds:
            for u, v, w in arcs:
                if dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
        for _ in rounds:
            for u, v, w in arcs:
                if dist[u] + w < dist[v]:
                    dist[v] = -INF
        return dist

    def bfs(self, start: int) -> dict[int, Optional[int]]:
        """Breadth-first predecessor of every node (None if none)."""
        self._check_node(start)
        prev: dict[int, Optional[int]] = {n: None for n in self.nodes}
        visited = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for child in self._neighbours(node):
                if child not in visited:
                    visited.add(child)
                    prev[child] = node
                    queue.append(child)
        return prev

    def bridges(self) -> list[tuple[int, int]]:
        """Edges whose removal disconnects the graph, in discovery order."""
        ids: dict[int, int] = {}
        low: dict[int, int] = {}
        found: list[tuple[int, int]] = []

        def visit(cur: int, parent: Optional[int], depth: int) -> None:
            ids[cur] = low[cur] = depth
            for child in self._neighbours(cur):
                if child == parent:
                    continue
                if child not in ids:
                    visit(child, cur, depth + 1)
                    low[cur] = min(low[cur], low[child])
                    if ids[cur] < low[child]:
                        found.append((cur, child))
                else:
                    low[cur] = min(low[cur], ids[child])

        for node in self.nodes:
            if node not in ids:
                visit(node, None, 0)
        return found

    def dfs(self) -> int:
        """Number of components reached by depth-first search."""
        visited: set[int] = set()
        components = 0
        for root in self.nodes:
            if root in visited:
                continue
            components += 1
            stack = [root]
            visited.add(root)
            while stack:
                node = stack.pop()
                for child in self._neighbours(node):
                    if child not in visited:
                        visited.add(child)
                        stack.append(child)
        return components

    def lazy_dijkstra(
        self, start: int
    ) -> tuple[dict[int, float], dict[int, Optional[int]]]:
        """Shortest distances and predecessors from ``start`` (non-negative weights)."""
        self._check_node(start)
        dist = {n: INF for n in self.nodes}
        prev: dict[int, Optional[int]] = {n: None for n in self.nodes}
        visited: set[int] = set()
        dist[start] = 0
        heap: list[tuple[float, int]] = [(0, start)]
        while heap:
            d, node = heapq.heappop(heap)
            if dist[node] < d:
                continue
            visited.add(node)
            for child, w in self._adj[node]:
                if child in visited:
                    continue
                new_dist = dist[node] + w
                if new_dist < dist[child]:
                    dist[child] = new_dist
                    prev[child] = node
                    heapq.heappush(heap, (new_dist, child))
        return dist, prev

    def _degrees(self) -> tuple[dict[int, int], dict[int, int]]:
        if not self.directed:
            raise ValueError("Eulerian paths are computed for directed graphs only")
        in_deg = {n: 0 for n in self.nodes}
        out_deg = {n: len(self._adj[n]) for n in self.nodes}
        for u in self.nodes:
            for child in self._neighbours(u):
                in_deg[child] += 1
        return in_deg, out_deg

    def has_eulerian_path(self) -> bool:
        """True if in/out degrees allow a path using every edge once."""
        in_deg, out_deg = self._degrees()
        starts = ends = 0
        for n in self.nodes:
            diff = out_deg[n] - in_deg[n]
            if abs(diff) > 1:
                return False
            if diff == 1:
                starts += 1
            elif diff == -1:
                ends += 1
        return (starts, ends) in ((0, 0), (1, 1))

    def euler_path(self) -> list[int]:
        """A path that uses every edge exactly once.

        Raises ``ValueError`` if the degrees rule one out or the edges are
        not all connected.
        """
        if not self.has_eulerian_path():
            raise ValueError("graph has no Eulerian path")
        if not self._edges:
            return []
        in_deg, out_deg = self._degrees()
        start = next((n for n in self.nodes if out_deg[n] - in_deg[n] == 1), None)
        if start is None:
            start = max(n for n in self.nodes if out_deg[n])
        used = {n: 0 for n in self.nodes}
        path: list[int] = []
        stack = [start]
        while stack:
            at = stack[-1]
            if used[at] < len(self._adj[at]):
                stack.append(self._adj[at][used[at]][0])
                used[at] += 1
            else:
                path.append(stack.pop())
        path.reverse()
        if len(path) != len(self._edges) + 1:
            raise ValueError("graph is disconnected")
        return path

    def floyd_warshall(self) -> dict[int, dict[int, float]]:
        """All-pairs shortest distances, ``dist[i][j]``; ``inf`` if unreachable."""
        dist = {i: {j: (0 if i == j else INF) for j in self.nodes} for i in self.nodes}
        for u, v, w in self._arcs():
            dist[u][v] = w
        for k in self.nodes:
            through = dist[k]
            for row in dist.values():
                via = row[k]
                for j, rest in through.items():
                    if via + rest < row[j]:
                        row[j] = via + rest
        return dist

    def prims_mst(self) -> tuple[float, dict[int, list[int]]]:
        """Minimum spanning tree as ``(cost, adjacency)``.

        Edges are treated as undirected. Raises ``ValueError`` if the graph
        is disconnected.
        """
        tree: dict[int, list[int]] = {n: [] for n in self.nodes}
        if not self.num_nodes:
            return 0, tree
        links: dict[int, list[tuple[int, float]]] = {n: [] for n in self.nodes}
        for u, v, w in self._edges:
            links[u].append((v, w))
            links[v].append((u, w))
        visited = {1}
        heap = [(w, 1, v) for v, w in links[1]]
        heapq.heapify(heap)
        cost: float = 0
        while heap and len(visited) < self.num_nodes:
            w, u, v = heapq.heappop(heap)
            if v in visited:
                continue
            visited.add(v)
            tree[u].append(v)
            tree[v].append(u)
            cost += w
            for nxt, weight in links[v]:
                if nxt not in visited:
                    heapq.heappush(heap, (weight, v, nxt))
        if len(visited) < self.num_nodes:
            raise ValueError("graph is disconnected")
        return cost, tree

    def strongly_connected_components(self) -> list[list[int]]:
        """Strongly connected components (Tarjan), in the order they close."""
        counter = count()
        ids: dict[int, int] = {}
        low: dict[int, int] = {}
        stack: list[int] = []
        on_stack: set[int] = set()
        components: list[list[int]] = []

        def visit(cur: int) -> None:
            ids[cur] = low[cur] = next(counter)
            stack.append(cur)
            on_stack.add(cur)
            for child in self._neighbours(cur):
                if child not in ids:
                    visit(child)
                if child in on_stack:
                    low[cur] = min(low[cur], low[child])
            if low[cur] == ids[cur]:
                component = []
                while True:
                    val = stack.pop()
                    on_stack.discard(val)
                    low[val] = ids[cur]
                    component.append(val)
                    if val == cur:
                        break
                components.append(component)

        for node in self.nodes:
            if node not in ids:
                visit(node)
        return components

    def topological_sort(self) -> list[int]:
        """Nodes in reverse depth-first finishing order."""
        visited: set[int] = set()
        order: list[int] = []

        def visit(node: int) -> None:
            visited.add(node)
            for child in self._neighbours(node):
                if child not in visited:
                    visit(child)
            order.append(node)

        for node in self.nodes:
            if node not in visited:
                visit(node)
        order.reverse()
        return order

    def dag_shortest_path(
        self,
    ) -> tuple[dict[int, float], dict[int, Optional[int]]]:
        """Distances and predecessors from the first node in topological order."""
        order = self.topological_sort()
        dist = {n: INF for n in self.nodes}
        prev: dict[int, Optional[int]] = {n: None for n in self.nodes}
        if not order:
            return dist, prev
        dist[order[0]] = 0
        for node in order:
            for child, w in self._adj[node]:
                new_dist = dist[node] + w
                if new_dist < dist[child]:
                    dist[child] = new_dist
                    prev[child] = node
        return dist, prev


def reconstruct_path(
    prev: Mapping[int, Optional[int]], start: int, end: int
) -> list[int]:
    """Follow predecessors back from ``end``; empty if ``start`` is not reached."""
    path = [end]
    node: Optional[int] = end
    while (node := prev.get(node)) is not None:
        path.append(node)
    path.reverse()
    return path if path[0] == start else []


def _popcount(value: int) -> int:
    return bin(value).count("1")


def tsp_table(matrix: Sequence[Sequence[float]], start: int) -> list[list[float]]:
    """Bitmask DP table: ``dp[last][state]`` is the cheapest path from ``start``
    through the nodes of ``state`` ending at ``last``."""
    size = len(matrix)
    if not 0 <= start < size:
        raise ValueError(f"start must be between 0 and {size - 1}")
    dp = [[INF] * (1 << size) for _ in range(size)]
    start_bit = 1 << start
    for i in range(size):
        if i != start:
            dp[i][(1 << i) | start_bit] = matrix[start][i]
    for bits in range(3, size + 1):
        for state in range(1 << size):
            if _popcount(state) != bits or not state & start_bit:
                continue
            for nxt in range(size):
                if nxt == start or not state & (1 << nxt):
                    continue
                prev_state = state ^ (1 << nxt)
                for last in range(size):
                    if last in (nxt, start) or not state & (1 << last):
                        continue
                    new_dist = dp[last][prev_state] + matrix[last][nxt]
                    if new_dist < dp[nxt][state]:
                        dp[nxt][state] = new_dist
    return dp


def tsp_path(matrix: Sequence[Sequence[float]], start: int) -> tuple[float, list[int]]:
    """Shortest tour from ``start`` through every node and back.

    Returns ``(distance, path)`` where the path begins and ends at ``start``.
    """
    size = len(matrix)
    if size < 2:
        raise ValueError("a tour needs at least two nodes")
    dp = tsp_table(matrix, start)
    full = (1 << size) - 1
    dist = min(
        dp[i][full] + matrix[i][start] for i in range(size) if i != start
    )
    path = [start] * (size + 1)
    state = full
    last = start
    for position in range(size - 1, 0, -1):
        candidates = [
            j for j in range(size) if j != start and state & (1 << j)
        ]
        index = candidates[0]
        for j in candidates:
            if dp[j][state] + matrix[j][last] < dp[index][state] + matrix[index][last]:
                index = j
        path[position] = index
        state ^= 1 << index
        last = index
    return dist, path