"""Algorithm drills: base conversion, number puzzles, text, Big O and sorting."""

__version__ = "0.1.0"