"""Classic algorithms: sorting, shortest paths, spanning trees, knapsack, permutations, N-queens and topological sort."""

__version__ = "0.1.0"