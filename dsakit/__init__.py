"""Classic data structures and algorithms in plain Python: sorting, searching, graphs, trees, heaps, greedy and dynamic programming."""

__version__ = "0.1.0"