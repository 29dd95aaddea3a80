from __future__ import annotations
import random
from typing import List, Optional

from .errors import missing_message
from .graph import WordGraph
from .models import BridgeResult, RandomSource
from .normalize import normalize_word, tokenize

# /* ~~~ bridge words: b such that word1 -> b and b -> word2 ~~~ */

def _bridges(graph: WordGraph, w1: str, w2: str) -> List[str]:
    """Bridge candidates in insertion order of w1's outgoing edges. Both words must exist."""
    src = graph.index_of(w1)
    dst = graph.index_of(w2)
    return [graph.word_at(mid) for mid, _ in graph.out_edges(src) if graph.has_edge(mid, dst)]

def find_bridge_words(graph: WordGraph, word1: str, word2: str) -> BridgeResult:
    """Lowercase both words, report the missing ones, otherwise collect the bridges."""
    w1 = normalize_word(word1)
    w2 = normalize_word(word2)
    missing = tuple(w for w in (w1, w2) if w not in graph)
    if missing:
        # "No "x" and "x" in the graph!" when the same unknown word is queried twice
        return BridgeResult(w1, w2, missing=missing)
    return BridgeResult(w1, w2, bridges=tuple(_bridges(graph, w1, w2)))

def format_bridge_words(result: BridgeResult) -> str:
    if result.missing:
        return missing_message(result.missing)
    w1, w2, found = result.word1, result.word2, result.bridges
    if not found:
        return f'No bridge words from "{w1}" to "{w2}"!'
    quoted = [f'"{b}"' for b in found]
    if len(quoted) == 1:
        return f'The bridge words from "{w1}" to "{w2}" is: {quoted[0]}.'
    listed = ", ".join(quoted[:-1]) + " and " + quoted[-1]
    return f'The bridge words from "{w1}" to "{w2}" are: {listed}.'

def query_bridge_words(graph: WordGraph, word1: str, word2: str) -> str:
    return format_bridge_words(find_bridge_words(graph, word1, word2))

# /* ~~~ text generation: insert one random bridge word into every pair that has one ~~~ */

def generate_new_text(graph: WordGraph, text: str, rng: Optional[RandomSource] = None) -> str:
    """
    Rewrite `text` inserting a bridge word between each adjacent pair.

    Punctuation is dropped, original casing of the input words is kept, the
    inserted words are lowercase (as stored). Input with fewer than two words
    comes back unchanged.
    """
    words = tokenize(text, keep_case=True)
    if len(words) < 2:
        return text
    rng = rng or random.SystemRandom()

    out: List[str] = []
    for w1, w2 in zip(words, words[1:]):
        out.append(w1)
        lo1, lo2 = w1.lower(), w2.lower()
        if lo1 in graph and lo2 in graph:
            found = _bridges(graph, lo1, lo2)
            if found:
                out.append(found[rng.randrange(len(found))])
    out.append(words[-1])
    return " ".join(out)
