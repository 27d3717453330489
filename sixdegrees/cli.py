"""
Command-line entrypoint for the six degrees analysis.

Loads a review dump, draws two independent seed-set samples, builds a
graph from each, and reports whether the average shortest path length of
each graph stays within the six degrees threshold.
"""

from __future__ import annotations

import json
import sys
import time
from pathlib import Path
from typing import List, Optional

from sixdegrees.comparison import (
    compare_average_shortest_paths,
    comparison_to_dict,
    format_comparison,
)
from sixdegrees.config import DATA_FILE, DEFAULT_SAMPLE_SIZE, SIX_DEGREES_THRESHOLD
from sixdegrees.graph import build_undirected
from sixdegrees.reviews import ReviewParseError, load_reviews
from sixdegrees.sampler import ReviewSampler


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="Test six degrees of separation on two random samples of a review graph.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default dataset and sample size
  sixdegrees

  # Reproducible run on another dump, results saved as JSON
  sixdegrees --input data/Books_5.json.gz --seed 7 --output data_analysis/books.json
        """,
    )
    parser.add_argument("--input", type=Path, default=DATA_FILE, help=f"Review dump, JSON lines, optionally gzipped (default: {DATA_FILE.name})")
    parser.add_argument("--sample-size", type=int, default=DEFAULT_SAMPLE_SIZE, help=f"Number of entities drawn per sample (default: {DEFAULT_SAMPLE_SIZE})")
    parser.add_argument("--threshold", type=float, default=SIX_DEGREES_THRESHOLD, help=f"Six degrees threshold (default: {SIX_DEGREES_THRESHOLD})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the sampler (default: unseeded)")
    parser.add_argument("--processes", type=int, default=1, help="Worker processes for BFS (default: 1)")
    parser.add_argument("--output", type=Path, default=None, help="Write results as JSON to this file")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    return parser


def run(
    input_file: Path,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
    threshold: float = SIX_DEGREES_THRESHOLD,
    seed: Optional[int] = None,
    processes: int = 1,
    output_file: Optional[Path] = None,
    show_progress: bool = True,
) -> List[str]:
    """Run the full analysis and print the report.

    Returns:
        The report lines that were printed.
    """
    start = time.time()

    print("=" * 80)
    print("Six Degrees of Separation Analysis")
    print("=" * 80)
    print(f"Input: {input_file}")
    print(f"Sample size: {sample_size:,} entities per graph")
    print()

    reviews = load_reviews(input_file, show_progress=show_progress)
    print(f"Loaded {len(reviews):,} reviews")

    sampler = ReviewSampler(seed=seed)
    edges1 = sampler.sample(reviews, sample_size)
    graph1 = build_undirected(edges1)
    edges2 = sampler.sample(reviews, sample_size)
    graph2 = build_undirected(edges2)

    for index, edges, graph in ((1, edges1, graph1), (2, edges2, graph2)):
        print(f"  Graph {index}: {len(edges):,} sampled reviews, {graph.number_of_nodes():,} nodes, {graph.number_of_edges():,} edges")
    print()

    comparison = compare_average_shortest_paths(
        graph1,
        graph2,
        threshold=threshold,
        show_progress=show_progress,
        processes=processes,
    )

    lines = format_comparison(comparison)
    print("\n" + "=" * 80)
    print("Results")
    print("=" * 80)
    for line in lines:
        print(line)

    elapsed = time.time() - start

    if output_file is not None:
        results = {
            "input_file": str(input_file),
            "reviews": len(reviews),
            "sample_size": sample_size,
            "seed": seed,
            "sampled_reviews": [len(edges1), len(edges2)],
            "comparison": comparison_to_dict(comparison),
            "elapsed_seconds": elapsed,
        }
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with output_file.open("w", encoding="utf-8") as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
        print(f"\nResults saved to: {output_file}")

    print(f"Time elapsed is: {elapsed:.2f}s")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.sample_size < 0:
        print(f"Error: --sample-size must be non-negative, got {args.sample_size}")
        return 2
    if args.processes < 1:
        print(f"Error: --processes must be at least 1, got {args.processes}")
        return 2

    try:
        run(
            input_file=args.input,
            sample_size=args.sample_size,
            threshold=args.threshold,
            seed=args.seed,
            processes=args.processes,
            output_file=args.output,
            show_progress=not args.no_progress,
        )
    except FileNotFoundError as e:
        print(f"Error: {e}")
        return 1
    except ReviewParseError as e:
        print(f"Error: malformed review record at {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
