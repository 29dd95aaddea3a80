from __future__ import annotations
import heapq
import math
from typing import List, Optional

from .errors import UnreachableError, WordNotFoundError
from .graph import WordGraph
from .models import PathResult
from .normalize import normalize_word

def shortest_path(graph: WordGraph, word1: str, word2: str) -> PathResult:
    """
    Dijkstra from word1 to word2 over edge weights.

    Raises:
        WordNotFoundError: either word is not a vertex
        UnreachableError: no directed path (an undirected one does not count)
    """
    w1 = normalize_word(word1)
    w2 = normalize_word(word2)
    missing = [w for w in (w1, w2) if w not in graph]
    if missing:
        raise WordNotFoundError(missing)
    if w1 == w2:
        return PathResult(w1, w2, (w1,), 0)

    src = graph.index_of(w1)
    dst = graph.index_of(w2)
    n = len(graph)
    dist: List[float] = [math.inf] * n
    pred: List[Optional[int]] = [None] * n
    dist[src] = 0
    pq = [(0, src)]

    while pq:
        d, u = heapq.heappop(pq)
        if d > dist[u]:
            continue  # stale entry
        for v, w in graph.out_edges(u):
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                pred[v] = u
                heapq.heappush(pq, (nd, v))

    if dist[dst] == math.inf:
        raise UnreachableError(w1, w2)

    path: List[str] = []
    cur: Optional[int] = dst
    while cur is not None:
        path.append(graph.word_at(cur))
        cur = pred[cur]
    path.reverse()
    return PathResult(w1, w2, tuple(path), int(dist[dst]))

def format_path(result: PathResult) -> str:
    return (f'The shortest path from "{result.source}" to "{result.target}" is: '
            f'{" -> ".join(result.words)} (length: {result.length})')
