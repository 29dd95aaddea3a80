from __future__ import annotations
import logging
import random
import threading
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Set, Tuple, Union

from . import config as CFG
from .graph import WordGraph
from .models import RandomSource

log = logging.getLogger(__name__)

# /* ~~~ core walk: pure, always terminates (dead end or repeated edge) ~~~ */

def iter_random_walk(graph: WordGraph, rng: Optional[RandomSource] = None) -> Iterator[str]:
    """
    Yield the words of a weighted random walk, start word first.

    Successors are drawn proportionally to edge weight. The walk ends at a
    vertex without outgoing edges, or when the drawn edge (by source and
    destination) was already traversed; in that case the drawn word is not
    yielded. Words are produced lazily so a consumer that stops early never
    computes the rest.
    """
    if graph.is_empty():
        return
    rng = rng or random.Random()

    current = rng.randrange(len(graph))
    yield graph.word_at(current)

    visited: Set[Tuple[int, int]] = set()
    while True:
        candidates: List[int] = []
        for dst, w in graph.out_edges(current):
            candidates.extend([dst] * w)
        if not candidates:
            return
        nxt = candidates[rng.randrange(len(candidates))]
        edge = (current, nxt)
        if edge in visited:
            return
        visited.add(edge)
        yield graph.word_at(nxt)
        current = nxt

def random_walk(graph: WordGraph, rng: Optional[RandomSource] = None) -> List[str]:
    """The full walk as a list; [] on an empty graph."""
    return list(iter_random_walk(graph, rng))

# /* ~~~ presentation: paced emission with cooperative cancellation ~~~ */

def play_walk(
    words: Iterable[str],
    emit: Callable[[str], None],
    *,
    stop: Optional[threading.Event] = None,
    delay: float = CFG.WALK_DELAY,
) -> List[str]:
    """
    Emit words one by one, `delay` seconds apart, until exhausted or `stop` is set.

    The stop event is checked before every emission and the pause waits on
    it, so setting it from another thread ends the playback within one
    word. Returns the words actually emitted.
    """
    stop = stop or threading.Event()
    emitted: List[str] = []
    for word in words:
        if stop.is_set():
            log.info("Random walk stopped after %d words", len(emitted))
            break
        emit(word)
        emitted.append(word)
        if delay > 0 and stop.wait(delay):
            log.info("Random walk stopped after %d words", len(emitted))
            break
    return emitted

def save_walk(words: Iterable[str], path: Union[str, Path] = CFG.WALK_OUTPUT) -> Path:
    """Write the walk as one space-separated line; returns the path written."""
    p = Path(path)
    p.write_text(" ".join(words), encoding=CFG.ENCODING)
    log.info("Saved random walk to %s", p)
    return p
