"""
Average shortest path length of a ReviewGraph.

BFS runs from every node; every positive distance found is added to the
totals. Each unordered reachable pair is therefore counted twice, once
from each endpoint. The doubling cancels in the mean, so the average
matches the usual undirected definition.

A graph with no reachable pair (empty, or isolated nodes only) has no
defined average: `average_shortest_path` returns None for it instead of
dividing zero by zero.
"""

from __future__ import annotations

import multiprocessing as mp
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Set

import networkx as nx
from tqdm import tqdm

from sixdegrees.graph import ReviewGraph, shortest_paths


@dataclass
class PathLengthStats:
    total_length: int = 0
    total_pairs: int = 0
    distribution: Dict[int, int] = field(default_factory=dict)

    @property
    def average(self) -> Optional[float]:
        if self.total_pairs == 0:
            return None
        return self.total_length / self.total_pairs

    @property
    def min_length(self) -> Optional[int]:
        return min(self.distribution) if self.distribution else None

    @property
    def max_length(self) -> Optional[int]:
        return max(self.distribution) if self.distribution else None

    @property
    def median_length(self) -> Optional[int]:
        """Upper median of all counted distances."""
        if self.total_pairs == 0:
            return None
        position = self.total_pairs // 2
        seen = 0
        for length in sorted(self.distribution):
            seen += self.distribution[length]
            if seen > position:
                return length
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "average_path_length": self.average,
            "total_length": self.total_length,
            "total_pairs": self.total_pairs,
            "min_path_length": self.min_length,
            "max_path_length": self.max_length,
            "median_path_length": self.median_length,
            "distribution": {str(k): v for k, v in sorted(self.distribution.items())},
        }


def _source_distances(adj: Mapping[str, Set[str]], source: str) -> Counter:
    return Counter(d for d in shortest_paths(adj, source).values() if d > 0)


# Set in each pool worker by _init_worker
_WORKER_ADJ: Optional[Mapping[str, Set[str]]] = None


def _init_worker(adj: Dict[str, Set[str]]) -> None:
    global _WORKER_ADJ
    _WORKER_ADJ = adj


def _worker_source_distances(source: str) -> Counter:
    return _source_distances(_WORKER_ADJ, source)


def path_length_stats(
    graph: ReviewGraph,
    show_progress: bool = False,
    processes: int = 1,
) -> PathLengthStats:
    """Accumulate shortest path lengths over all ordered reachable pairs.

    Args:
        graph: Graph to analyse. It is only read.
        show_progress: Show a tqdm bar over BFS sources.
        processes: Number of worker processes. 1 runs in-process; more
            fans the per-source BFS runs out over a multiprocessing pool
            and sums the partial results.

    Returns:
        PathLengthStats with totals and the distance distribution.
    """
    if processes < 1:
        raise ValueError(f"processes must be at least 1, got {processes}")

    nodes = graph.nodes()
    histogram: Counter = Counter()
    progress = dict(desc="Computing paths", unit="node", total=len(nodes), disable=not show_progress)

    if processes == 1 or len(nodes) < 2:
        adj = graph.adjacency
        for source in tqdm(nodes, **progress):
            histogram.update(_source_distances(adj, source))
    else:
        adj = {u: set(nbrs) for u, nbrs in graph.adjacency.items()}
        chunksize = max(1, len(nodes) // (processes * 8))
        with mp.Pool(processes=processes, initializer=_init_worker, initargs=(adj,)) as pool:
            results = pool.imap_unordered(_worker_source_distances, nodes, chunksize=chunksize)
            for partial in tqdm(results, **progress):
                histogram.update(partial)

    return PathLengthStats(
        total_length=sum(length * count for length, count in histogram.items()),
        total_pairs=sum(histogram.values()),
        distribution=dict(histogram),
    )


def average_shortest_path(
    graph: ReviewGraph,
    show_progress: bool = False,
    processes: int = 1,
) -> Optional[float]:
    """Mean BFS distance over all ordered reachable pairs, or None if there are none."""
    return path_length_stats(graph, show_progress=show_progress, processes=processes).average


def graph_summary(graph: ReviewGraph) -> Dict[str, int]:
    """Node, edge and connected component counts of a graph."""
    G = graph.to_networkx()
    components = list(nx.connected_components(G))
    return {
        "nodes": G.number_of_nodes(),
        "edges": G.number_of_edges(),
        "connected_components": len(components),
        "largest_component": max((len(c) for c in components), default=0),
    }
