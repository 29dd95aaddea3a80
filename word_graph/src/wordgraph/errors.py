# src/wordgraph/errors.py
"""
Expected, recoverable failures of the word graph.

None of these is fatal: the engine turns them into result messages (or a
sentinel value for PageRank) and only construction failures propagate to
the caller.
"""

from __future__ import annotations
from typing import Sequence


class WordGraphError(Exception):
    """Base class for every error raised by the wordgraph package."""


class InsufficientInputError(WordGraphError):
    """Fewer than two tokens survived normalization; no graph can be built."""

    def __init__(self, token_count: int) -> None:
        super().__init__(f"Not enough words to build a graph (got {token_count}, need at least 2).")
        self.token_count = token_count


class WordNotFoundError(WordGraphError):
    """One or both queried words are not vertices of the graph."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(missing_message(self.missing))


class UnreachableError(WordGraphError):
    """Both words exist but no directed path leads from source to target."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f'"{source}" and "{target}" are unreachable.')
        self.source = source
        self.target = target


def missing_message(missing: Sequence[str]) -> str:
    """`No "a" in the graph!` / `No "a" and "b" in the graph!`"""
    names = " and ".join(f'"{w}"' for w in missing)
    return f"No {names} in the graph!"
