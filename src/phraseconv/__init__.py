"""Greedy longest-match script conversion with OpenCC style phrase dictionaries."""

from __future__ import annotations

from .builtin import get_builtin
from .converter import Converter, Segment, replace_all, scan
from .dictionary import iter_entries, load_entries, load_index, load_string, parse_line
from .index import DictionaryIndex, Match

__version__ = "0.1.0"

__all__ = [
    "Converter",
    "DictionaryIndex",
    "Match",
    "Segment",
    "get_builtin",
    "iter_entries",
    "load_entries",
    "load_index",
    "load_string",
    "parse_line",
    "replace_all",
    "scan",
]
