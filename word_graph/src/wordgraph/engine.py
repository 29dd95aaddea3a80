# wordgraph/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterator, List, Optional

from .bridge import generate_new_text, query_bridge_words
from .errors import InsufficientInputError, UnreachableError, WordNotFoundError
from .graph import WordGraph
from .models import RandomSource
from .paths import format_path, shortest_path
from .rank import pagerank
from .walk import iter_random_walk

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - graph construction from a text file or a string (WordGraph),
      - the query modules (bridge, paths, rank, walk),
      - the user-facing messages of each operation.

    Public API (used by CLI/Flask/GUI):
      * build(path | text):       load -> normalize -> build graph
      * show_graph():             adjacency listing
      * query_bridge_words(a, b): bridge-word message
      * generate_new_text(text):  text with bridge words inserted
      * calc_shortest_path(a, b): path message with total length
      * cal_page_rank(word):      rank or config.PAGERANK_MISSING
      * random_walk():            list of walked words
      * shutdown():               drop the graph
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.graph: Optional[WordGraph] = None
        self.source: Optional[str] = None

    # /* ~~~ Build the graph from a file (or raw text) ~~~ */
    def build(
        self,
        path: Optional[str] = None,
        *,
        text: Optional[str] = None,   # bypasses the file, handy for tests and the web API
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["WORDGRAPH_VERBOSE"] = "1"

        if (path is None) == (text is None):
            raise ValueError("build(): pass exactly one of path or text")

        try:
            if path is not None:
                log.info("Loading text from %s", path)
                graph = WordGraph.from_file(path)
            else:
                graph = WordGraph.from_text(text)  # type: ignore[arg-type]
        except FileNotFoundError:
            log.error("File not found: %s", path)
            raise
        except InsufficientInputError as exc:
            log.error("%s", exc)
            raise

        self.graph = graph
        self.source = path if path is not None else "<text>"
        log.info("Engine build() complete: vertices=%d edges=%d", len(graph), graph.edge_count)

    # ------------- queries -------------

    def show_graph(self) -> str:
        g = self._require()
        if g.edge_count == 0:
            return "The graph is empty."
        lines = ["Directed Graph Representation:"]
        for src, succ in g.weight_map().items():
            edges = ", ".join(f"{dst} (weight: {w})" for dst, w in succ.items())
            lines.append(f"{src} -> {edges}")
        return "\n".join(lines)

    def query_bridge_words(self, word1: str, word2: str) -> str:
        return query_bridge_words(self._require(), word1, word2)

    def generate_new_text(self, text: str, rng: Optional[RandomSource] = None) -> str:
        return generate_new_text(self._require(), text, rng)

    def calc_shortest_path(self, word1: str, word2: str) -> str:
        try:
            return format_path(shortest_path(self._require(), word1, word2))
        except (WordNotFoundError, UnreachableError) as exc:
            return str(exc)

    def cal_page_rank(self, word: Optional[str]) -> float:
        return pagerank(self._require(), word)

    def iter_random_walk(self, rng: Optional[RandomSource] = None) -> Iterator[str]:
        return iter_random_walk(self._require(), rng)

    def random_walk(self, rng: Optional[RandomSource] = None) -> List[str]:
        return list(self.iter_random_walk(rng))

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.graph = None
        self.source = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require(self) -> WordGraph:
        if self.graph is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.graph
