"""
Compare two sampled graphs against the six degrees threshold.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sixdegrees.config import SIX_DEGREES_THRESHOLD
from sixdegrees.graph import ReviewGraph
from sixdegrees.path_analysis import PathLengthStats, graph_summary, path_length_stats


@dataclass
class GraphComparison:
    stats_1: PathLengthStats
    stats_2: PathLengthStats
    threshold: float = SIX_DEGREES_THRESHOLD
    summary_1: Dict[str, int] = field(default_factory=dict)
    summary_2: Dict[str, int] = field(default_factory=dict)

    @property
    def average_1(self) -> Optional[float]:
        return self.stats_1.average

    @property
    def average_2(self) -> Optional[float]:
        return self.stats_2.average

    @property
    def holds_1(self) -> Optional[bool]:
        return _holds(self.average_1, self.threshold)

    @property
    def holds_2(self) -> Optional[bool]:
        return _holds(self.average_2, self.threshold)

    @property
    def shorter(self) -> Optional[int]:
        """1 or 2 for the graph with the smaller average, 0 on a tie.

        None when either average is undefined.
        """
        if self.average_1 is None or self.average_2 is None:
            return None
        if self.average_1 < self.average_2:
            return 1
        if self.average_1 > self.average_2:
            return 2
        return 0


def _holds(average: Optional[float], threshold: float) -> Optional[bool]:
    if average is None:
        return None
    return average <= threshold


def compare_average_shortest_paths(
    graph1: ReviewGraph,
    graph2: ReviewGraph,
    threshold: float = SIX_DEGREES_THRESHOLD,
    show_progress: bool = False,
    processes: int = 1,
) -> GraphComparison:
    """Compute both average shortest path lengths and compare them."""
    return GraphComparison(
        stats_1=path_length_stats(graph1, show_progress=show_progress, processes=processes),
        stats_2=path_length_stats(graph2, show_progress=show_progress, processes=processes),
        threshold=threshold,
        summary_1=graph_summary(graph1),
        summary_2=graph_summary(graph2),
    )


def format_comparison(comparison: GraphComparison) -> List[str]:
    """Report lines for a comparison, in the order they are printed."""
    lines: List[str] = []
    for index, average, holds in (
        (1, comparison.average_1, comparison.holds_1),
        (2, comparison.average_2, comparison.holds_2),
    ):
        if average is None:
            lines.append(f"Graph {index}: Average Shortest Path Length = undefined (no connected pairs)")
            lines.append(f"Six degrees of separation cannot be evaluated for Graph {index}.")
            continue
        lines.append(f"Graph {index}: Average Shortest Path Length = {average:.2f}")
        if holds:
            lines.append(f"Six degrees of separation hold true for Graph {index}.")
        else:
            lines.append(f"Six degrees of separation do not hold true for Graph {index}.")

    if comparison.shorter == 1:
        lines.append("Graph 1 has a shorter average shortest path.")
    elif comparison.shorter == 2:
        lines.append("Graph 2 has a shorter average shortest path.")
    elif comparison.shorter == 0:
        lines.append("Both graphs have the same average shortest path.")
    else:
        lines.append("Average shortest paths cannot be compared.")
    return lines


def comparison_to_dict(comparison: GraphComparison) -> Dict[str, Any]:
    return {
        "threshold": comparison.threshold,
        "graphs": [
            {
                "graph": 1,
                "summary": comparison.summary_1,
                "path_statistics": comparison.stats_1.to_dict(),
                "six_degrees_hold": comparison.holds_1,
            },
            {
                "graph": 2,
                "summary": comparison.summary_2,
                "path_statistics": comparison.stats_2.to_dict(),
                "six_degrees_hold": comparison.holds_2,
            },
        ],
        "shorter_graph": comparison.shorter,
    }
