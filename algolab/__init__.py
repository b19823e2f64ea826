"""Classic graph, knapsack, backtracking and sorting algorithms, with example and benchmark commands."""

__version__ = "0.1.0"
__all__ = ["mst", "paths", "toposort", "knapsack", "backtracking", "sorting", "benchmark", "cli"]