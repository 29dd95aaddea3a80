"""
Source text loading.

Reads a whole text file into memory as one string. Line breaks are turned
into spaces so that the last word of a line and the first word of the next
one become adjacent, exactly as if the file were a single line.

Undecodable bytes are ignored rather than failing the load: the normalizer
drops everything that is not an ASCII letter anyway.
"""

# src/wordgraph/loader.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

from .config import ENCODING, VERBOSE

log = logging.getLogger(__name__)

def load_text(path: Union[str, Path], encoding: str = ENCODING) -> str:
    """
    Load the file at `path` and return its content with newlines as spaces.

    Args:
        path: file to read
        encoding: text encoding, defaults to config.ENCODING

    Returns:
        str: file content, one line per space-separated chunk

    Raises:
        FileNotFoundError: the file does not exist (reported once by the caller)
    """
    p = Path(path)
    with p.open("r", encoding=encoding, errors="ignore") as f:
        lines = [ln.rstrip("\r\n") for ln in f]
    if VERBOSE:
        print(f"[loaded] {p} lines={len(lines):,}")
    log.info("Read %d lines from %s", len(lines), p)
    return " ".join(lines)
