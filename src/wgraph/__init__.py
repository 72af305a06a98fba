"""wgraph — in-memory weighted directed graph with an interactive menu."""

__version__ = "0.1.0"
