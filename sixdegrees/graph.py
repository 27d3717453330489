"""
Undirected adjacency-set graph of reviewers and products.

Reviewers and products share one node namespace; an edge is a review
linking the two. All edges have unit length, so shortest paths are plain
breadth-first search distances.
"""

from __future__ import annotations

from collections import deque
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Set, Tuple

import networkx as nx

Edge = Tuple[str, str]
DistanceMap = Dict[str, int]

_NO_NEIGHBORS: FrozenSet[str] = frozenset()


class ReviewGraph:
    """Simple undirected graph stored as node -> set of neighbours."""

    def __init__(self) -> None:
        self._adj: Dict[str, Set[str]] = {}

    # --- construction ------------------------------------------------------

    def add_node(self, u: str) -> None:
        self._adj.setdefault(u, set())

    def add_edge(self, u: str, v: str) -> None:
        """Add the undirected edge u-v. Repeating an edge is a no-op."""
        self._adj.setdefault(u, set()).add(v)
        self._adj.setdefault(v, set()).add(u)

    # --- read access -------------------------------------------------------

    @property
    def adjacency(self) -> Mapping[str, Set[str]]:
        return MappingProxyType(self._adj)

    def nodes(self) -> List[str]:
        return list(self._adj)

    def neighbors(self, u: str) -> FrozenSet[str]:
        return frozenset(self._adj.get(u, _NO_NEIGHBORS))

    def number_of_nodes(self) -> int:
        return len(self._adj)

    def number_of_edges(self) -> int:
        # self-loops appear once in their own set, every other edge twice
        loops = sum(1 for u, nbrs in self._adj.items() if u in nbrs)
        return (sum(len(nbrs) for nbrs in self._adj.values()) + loops) // 2

    def __contains__(self, u: object) -> bool:
        return u in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adj)

    # --- algorithms --------------------------------------------------------

    def shortest_paths(self, start: str) -> DistanceMap:
        return shortest_paths(self._adj, start)

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(self._adj)
        for u, nbrs in self._adj.items():
            for v in nbrs:
                G.add_edge(u, v)
        return G


def build_undirected(edges: Iterable[Edge]) -> ReviewGraph:
    """Build a ReviewGraph from (u, v) pairs."""
    g = ReviewGraph()
    for u, v in edges:
        g.add_edge(u, v)
    return g


def shortest_paths(graph, start: str) -> DistanceMap:
    """Unweighted single-source shortest path lengths by BFS.

    Args:
        graph: A ReviewGraph or a plain node -> neighbours mapping.
        start: Source node. It does not need to be in the graph.

    Returns:
        Distance of every node reachable from `start`, including
        `start` itself at 0. Unreachable nodes are absent.
    """
    adj = graph.adjacency if isinstance(graph, ReviewGraph) else graph
    distances: DistanceMap = {start: 0}
    frontier = deque([start])

    while frontier:
        current = frontier.popleft()
        next_distance = distances[current] + 1
        for neighbor in adj.get(current, _NO_NEIGHBORS):
            if neighbor not in distances:
                distances[neighbor] = next_distance
                frontier.append(neighbor)

    return distances
