"""Command-line tools (tail, cat, Taskmaster option shells) and helpers: listing order, trees, lists, a bit codec."""

__version__ = "0.1.0"