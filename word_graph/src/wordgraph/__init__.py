"""
Word Graph Module

This module turns a free text into a weighted directed graph of words and
answers questions about it. Two words are linked when the second one
directly follows the first in the text; the edge weight counts how often
that happens.

The module is designed with a clean separation of concerns:
- Text normalization and graph construction
- Query algorithms (bridge words, shortest path, PageRank, random walk)
- Result models and the error taxonomy
- An Engine facade producing the user-facing messages

Main Entry Points:
    WordGraph.from_file(path) / WordGraph.from_text(text): build a graph
    Engine: build once, then query_bridge_words, generate_new_text,
            calc_shortest_path, cal_page_rank, random_walk

Example Usage:
    from wordgraph import Engine

    eng = Engine()
    eng.build("story.txt")
    print(eng.query_bridge_words("explore", "new"))
    print(eng.calc_shortest_path("to", "life"))

Version: 1.0.0
"""

# src/wordgraph/__init__.py
from .engine import Engine  # re-export
from .errors import InsufficientInputError, UnreachableError, WordGraphError, WordNotFoundError
from .graph import WordGraph

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "WordGraph",
    "WordGraphError",
    "InsufficientInputError",
    "WordNotFoundError",
    "UnreachableError",
]
