# src/wordgraph/graph.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, Union

from .errors import InsufficientInputError
from .loader import load_text
from .models import Edge
from .normalize import tokenize

log = logging.getLogger(__name__)


class WordGraph:
    """
    Directed word-adjacency graph.

    Vertices are normalized words, indexed by a small integer id assigned in
    order of first appearance. Each vertex owns an insertion-ordered mapping
    {neighbor id: weight}, where weight counts how many times the neighbor
    directly followed the word in the source text.

    The graph is built once (from_tokens / from_text / from_file) and is
    read-only afterwards; every query borrows it without copying.
    """

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}
        self._words: List[str] = []
        self._adj: List[Dict[int, int]] = []
        self._out_weight: List[int] = []
        self._edge_count = 0

    # ------------- construction -------------

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "WordGraph":
        """Build from already-normalized tokens; needs at least two of them."""
        words = list(tokens)
        if len(words) < 2:
            raise InsufficientInputError(len(words))
        g = cls()
        for w in words:
            g._vertex(w)
        for w1, w2 in zip(words, words[1:]):
            g._add_edge(g._ids[w1], g._ids[w2])
        log.info("Built graph: vertices=%d edges=%d tokens=%d", len(g), g.edge_count, len(words))
        return g

    @classmethod
    def from_text(cls, text: str) -> "WordGraph":
        return cls.from_tokens(tokenize(text))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "WordGraph":
        return cls.from_text(load_text(path))

    def _vertex(self, word: str) -> int:
        vid = self._ids.get(word)
        if vid is None:
            vid = len(self._words)
            self._ids[word] = vid
            self._words.append(word)
            self._adj.append({})
            self._out_weight.append(0)
        return vid

    def _add_edge(self, src: int, dst: int) -> None:
        succ = self._adj[src]
        if dst not in succ:
            self._edge_count += 1
        succ[dst] = succ.get(dst, 0) + 1
        self._out_weight[src] += 1

    # ------------- word-level reads -------------

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._ids

    @property
    def words(self) -> Tuple[str, ...]:
        """All vertices, in id order (order of first appearance)."""
        return tuple(self._words)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def is_empty(self) -> bool:
        return not self._words

    def weight(self, source: str, target: str) -> int:
        """Weight of source -> target, 0 if there is no such edge."""
        src = self._ids.get(source)
        dst = self._ids.get(target)
        if src is None or dst is None:
            return 0
        return self._adj[src].get(dst, 0)

    def successors(self, word: str) -> Mapping[str, int]:
        """{destination: weight} for `word`, in insertion order; empty for sinks/unknown words."""
        src = self._ids.get(word)
        if src is None:
            return {}
        return {self._words[dst]: w for dst, w in self._adj[src].items()}

    def edges(self) -> Iterator[Edge]:
        for src, succ in enumerate(self._adj):
            for dst, w in succ.items():
                yield Edge(self._words[src], self._words[dst], w)

    def weight_map(self) -> Dict[str, Dict[str, int]]:
        """Plain nested-dict copy {source: {destination: weight}} of every non-empty row."""
        return {self._words[src]: self.successors(self._words[src])
                for src, succ in enumerate(self._adj) if succ}

    # ------------- id-level reads (used by the algorithms) -------------

    def index_of(self, word: str) -> int:
        return self._ids[word]

    def word_at(self, vid: int) -> str:
        return self._words[vid]

    def out_edges(self, vid: int) -> Iterable[Tuple[int, int]]:
        """(neighbor id, weight) pairs of vertex `vid`, insertion order."""
        return self._adj[vid].items()

    def has_edge(self, src: int, dst: int) -> bool:
        return dst in self._adj[src]

    def out_weight(self, vid: int) -> int:
        """Sum of outgoing weights; 0 for a dangling vertex."""
        return self._out_weight[vid]

    def __repr__(self) -> str:
        return f"WordGraph(vertices={len(self)}, edges={self.edge_count})"
