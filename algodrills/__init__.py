"""Classic algorithms and dynamic-programming patterns."""

__version__ = "0.1.0"

__all__ = [
    "bitmask",
    "classic",
    "decisions",
    "graphs",
    "intervals",
    "knapsack",
    "paths",
    "sequences",
    "sorting",
]