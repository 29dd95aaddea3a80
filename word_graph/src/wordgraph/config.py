from __future__ import annotations
import os

# Progress logging (set WORDGRAPH_VERBOSE=1 to enable)
VERBOSE = os.environ.get("WORDGRAPH_VERBOSE") == "1"

# reading source text
ENCODING = "utf-8"

# PageRank
DAMPING: float = 0.85
EPSILON: float = 0.01      # L1 distance between two iterations
MAX_ITER: int = 100
PAGERANK_MISSING: float = -1.0   # returned when the word is not in the graph

# how many words /api/pagerank?top=... lists by default
TOP_K: int = 10

# Random walk presentation
WALK_DELAY: float = 1.0    # seconds between two emitted words
WALK_WRAP: int = 10        # newline every N words in the CLI
WALK_OUTPUT = "random_walk_output.txt"
