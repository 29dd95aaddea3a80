# src/wordgraph/models.py
"""
Result models for the word graph.

These are small frozen containers handed back by the query functions. They
carry no logic: message formatting lives next to the algorithm that
produced them (bridge.format_bridge_words, engine formatting for paths).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple


@dataclass(frozen=True, slots=True)
class Edge:
    """
    One directed edge of the graph.

    Attributes
    ----------
    source : str
        Word the edge leaves from.
    target : str
        Word that immediately followed `source` in the text.
    weight : int
        How many times `target` followed `source` (always >= 1).
    """
    source: str
    target: str
    weight: int


@dataclass(frozen=True, slots=True)
class BridgeResult:
    """
    Outcome of a bridge-word lookup between word1 and word2.

    `missing` lists the query words absent from the graph (in query order);
    when it is non-empty, `bridges` is empty and no lookup took place.
    `bridges` keeps the insertion order of word1's outgoing edges.
    """
    word1: str
    word2: str
    bridges: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PathResult:
    """A shortest path: words from source to target and its total weight."""
    source: str
    target: str
    words: Tuple[str, ...]
    length: int


class RandomSource(Protocol):
    """
    Anything producing uniformly distributed ints in [0, stop).

    random.Random and random.SystemRandom both fit; tests pass a stub that
    returns scripted values.
    """
    def randrange(self, stop: int) -> int: ...
