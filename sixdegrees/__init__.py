"""
Six degrees of separation analysis over reviewer-product review graphs.

This package contains:
- `config`: default paths, sample size and threshold.
- `reviews`: loader for gzip JSON-lines review dumps.
- `sampler`: seed-set expansion sampling of review pairs.
- `graph`: adjacency-set undirected graph with BFS shortest paths.
- `path_analysis`: average shortest path length and graph statistics.
- `comparison`: compares two sampled graphs against the threshold.
- `cli`: command-line entrypoint tying the steps together.
"""
