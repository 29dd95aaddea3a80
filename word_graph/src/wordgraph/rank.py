"""
PageRank over the word graph.

Weighted power iteration: a vertex hands its rank to its successors in
proportion to edge weight, dangling vertices (no outgoing weight) spread
theirs evenly over every vertex. Two flat lists indexed by vertex id hold
the current and the next rank vector.

Convergence: stop as soon as the L1 distance between the two vectors drops
below EPSILON. At that point the *current* vector is the answer (the
freshly computed one is discarded), otherwise the loop runs MAX_ITER times.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional

from . import config as CFG
from .graph import WordGraph
from .normalize import normalize_word

log = logging.getLogger(__name__)


def _iterate(graph: WordGraph, damping: float, epsilon: float, max_iter: int) -> List[float]:
    n = len(graph)
    out_weight = [graph.out_weight(u) for u in range(n)]
    dangling = [u for u in range(n) if out_weight[u] == 0]
    const_term = (1.0 - damping) / n

    current = [1.0 / n] * n
    nxt = [0.0] * n
    for it in range(max_iter):
        for v in range(n):
            nxt[v] = const_term

        for u in range(n):
            if out_weight[u] == 0:
                continue
            factor = damping * current[u] / out_weight[u]
            for v, w in graph.out_edges(u):
                nxt[v] += factor * w

        if dangling:
            dangling_contrib = damping * sum(current[u] for u in dangling) / n
            for v in range(n):
                nxt[v] += dangling_contrib

        diff = sum(abs(nxt[v] - current[v]) for v in range(n))
        if diff < epsilon:
            log.info("PageRank converged after %d iterations (diff=%.6f)", it + 1, diff)
            break

        current, nxt = nxt, [0.0] * n
    else:
        log.info("PageRank stopped at the iteration cap (%d)", max_iter)
    return current


def pagerank_scores(
    graph: WordGraph,
    *,
    damping: float = CFG.DAMPING,
    epsilon: float = CFG.EPSILON,
    max_iter: int = CFG.MAX_ITER,
) -> Dict[str, float]:
    """Rank of every word, {} for an empty graph."""
    if graph.is_empty():
        return {}
    ranks = _iterate(graph, damping, epsilon, max_iter)
    return {graph.word_at(v): r for v, r in enumerate(ranks)}


def pagerank(
    graph: WordGraph,
    word: Optional[str],
    *,
    damping: float = CFG.DAMPING,
    epsilon: float = CFG.EPSILON,
    max_iter: int = CFG.MAX_ITER,
) -> float:
    """
    PageRank of a single word.

    Returns CFG.PAGERANK_MISSING (-1.0) instead of raising when the word is
    None or not in the graph; a real rank is always > 0.
    """
    if word is None:
        return CFG.PAGERANK_MISSING
    w = normalize_word(word)
    if graph.is_empty() or w not in graph:
        return CFG.PAGERANK_MISSING
    ranks = _iterate(graph, damping, epsilon, max_iter)
    return ranks[graph.index_of(w)]


def top_ranked(graph: WordGraph, k: int = CFG.TOP_K) -> List[tuple[str, float]]:
    """The k highest-ranked words, ties broken alphabetically."""
    scores = pagerank_scores(graph)
    return sorted(scores.items(), key=lambda kv: (-kv[1], kv[0]))[:max(0, k)]
