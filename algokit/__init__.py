"""Classic algorithms: sorting, graphs, knapsack, string search, backtracking,
dynamic programming and divide and conquer, with a small command line tool."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "cli",
    "divide_conquer",
    "dynamic",
    "knapsack",
    "shortest_paths",
    "sorting",
    "spanning_trees",
    "string_search",
]