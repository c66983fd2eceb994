from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, NamedTuple, Optional, Tuple


class Match(NamedTuple):
    length: int
    target: str


@dataclass(slots=True, frozen=True)
class _Group:
    """Phrases sharing one first character, with their lengths longest first."""

    lengths: Tuple[int, ...]
    phrases: Dict[str, str]


class DictionaryIndex:
    """Immutable phrase table optimised for longest-prefix lookups.

    Phrases are grouped by their first character. A lookup only inspects the
    group for the character at the scan position and tries each distinct
    phrase length in that group from longest to shortest, so its cost depends
    on phrase length rather than on dictionary size.
    """

    __slots__ = ("_groups", "_size", "_max_length", "_skipped")

    def __init__(self, groups: Dict[str, _Group], skipped: int = 0) -> None:
        self._groups = groups
        self._size = sum(len(group.phrases) for group in groups.values())
        self._max_length = max((group.lengths[0] for group in groups.values()), default=0)
        self._skipped = skipped

    @classmethod
    def build(cls, entries: Iterable[Tuple[str, str]]) -> "DictionaryIndex":
        """Build an index from ``(source, target)`` pairs.

        A repeated source phrase keeps the target of its last occurrence.
        Entries with an empty source phrase are skipped and counted in
        :attr:`skipped`.
        """

        staged: Dict[str, Dict[str, str]] = {}
        skipped = 0
        for source, target in entries:
            if not source:
                skipped += 1
                continue
            staged.setdefault(source[0], {})[source] = target

        groups: Dict[str, _Group] = {}
        for first, phrases in staged.items():
            lengths = tuple(sorted({len(phrase) for phrase in phrases}, reverse=True))
            groups[first] = _Group(lengths=lengths, phrases=phrases)
        return cls(groups, skipped=skipped)

    @classmethod
    def empty(cls) -> "DictionaryIndex":
        return cls({})

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def skipped(self) -> int:
        return self._skipped

    def longest_match(self, text: str, position: int) -> Optional[Match]:
        """Return the longest phrase starting at ``position`` or ``None``."""

        if position < 0 or position >= len(text):
            return None
        group = self._groups.get(text[position])
        if group is None:
            return None

        remaining = len(text) - position
        for length in group.lengths:
            if length > remaining:
                continue
            target = group.phrases.get(text[position : position + length])
            if target is not None:
                return Match(length, target)
        return None

    def get(self, phrase: str, default: Optional[str] = None) -> Optional[str]:
        if not phrase:
            return default
        group = self._groups.get(phrase[0])
        if group is None:
            return default
        return group.phrases.get(phrase, default)

    def __contains__(self, phrase: object) -> bool:
        return isinstance(phrase, str) and self.get(phrase) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for group in self._groups.values():
            yield from group.phrases.items()

    def __repr__(self) -> str:
        return f"DictionaryIndex(phrases={self._size}, max_length={self._max_length})"
