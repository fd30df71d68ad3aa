"""Graph algorithms: disjoint sets, functional graphs and restricted reachability."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Sequence


class DisjointSet:
    """Union-find over the nodes ``0..n`` inclusive, with union by size and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is outside 0..{len(self._parent) - 1}")

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return False if they were already joined."""
        pu, pv = self.find(u), self.find(v)
        if pu == pv:
            return False
        if self._size[pu] > self._size[pv]:
            pu, pv = pv, pu
        self._parent[pu] = pv
        self._size[pv] += self._size[pu]
        return True


def gcd_sort(nums: Iterable[int]) -> bool:
    """Return True if ``nums`` can be sorted by swapping values that share a factor above 1."""
    values = list(nums)
    if len(values) <= 1:
        return True
    ordered = sorted(values)
    sets = DisjointSet(ordered[-1] + 1)
    for value in values:
        factor = 2
        while factor * factor <= value:
            if value % factor == 0:
                sets.union(value, factor)
                sets.union(value // factor, factor)
            factor += 1
    return all(
        sets.find(actual) == sets.find(wanted)
        for actual, wanted in zip(values, ordered)
    )


def _distances(edges: Sequence[int], start: int) -> dict[int, int]:
    distances: dict[int, int] = {}
    node = start
    step = 0
    while node != -1 and node not in distances:
        distances[node] = step
        step += 1
        node = edges[node]
    return distances


def closest_meeting_node(edges: Sequence[int], node1: int, node2: int) -> int:
    """Return the node reachable from both starts that minimises the larger distance, or -1.

    Ties go to the smallest node index.
    """
    first = _distances(edges, node1)
    second = _distances(edges, node2)
    candidates = [
        (max(first[node], second[node]), node)
        for node in first.keys() & second.keys()
    ]
    return min(candidates)[1] if candidates else -1


def reachable_nodes(
    n: int, edges: Iterable[Sequence[int]], restricted: Iterable[int]
) -> int:
    """Count the nodes reachable from node 0 without visiting a restricted node."""
    blocked = set(restricted)
    if 0 in blocked:
        return 0
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        if u in blocked or v in blocked:
            continue
        adjacency[u].append(v)
        adjacency[v].append(u)
    visited = {0}
    stack = [0]
    while stack:
        node = stack.pop()
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)
    return len(visited)


def edge_score(edges: Iterable[int]) -> int:
    """Return the node whose incoming edges have the largest sum of source indices.

    Ties go to the smallest node.
    """
    scores: defaultdict[int, int] = defaultdict(int)
    for source, target in enumerate(edges):
        scores[target] += source
    if not scores:
        raise ValueError("edges must not be empty")
    return min(scores, key=lambda node: (-scores[node], node))