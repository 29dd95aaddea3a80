from __future__ import annotations
import re
from typing import List

# anything that is not an ASCII letter separates words
_NON_LETTER = re.compile(r"[^a-zA-Z]")

def strip_non_letters(text: str) -> str:
    """Replace every character outside a-z / A-Z with a space (keeps case)."""
    return _NON_LETTER.sub(" ", text)

def tokenize(text: str, *, keep_case: bool = False) -> List[str]:
    """
    Split text into words:
      * non-letters become spaces (so "don't" -> ["don", "t"])
      * lowercased unless keep_case=True
      * runs of whitespace separate tokens, empty tokens never appear
    """
    s = strip_non_letters(text)
    if not keep_case:
        s = s.lower()
    return s.split()

def normalize_word(word: str) -> str:
    """Query-side normalization: callers may pass words in any case."""
    return word.lower()
