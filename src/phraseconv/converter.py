from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple, Tuple

from .index import DictionaryIndex


class Segment(NamedTuple):
    source: str
    target: str
    matched: bool


def scan(index: DictionaryIndex, text: str) -> Iterator[Segment]:
    """Walk ``text`` left to right, yielding matched phrases and passthrough characters."""

    position = 0
    end = len(text)
    while position < end:
        match = index.longest_match(text, position)
        if match is None:
            char = text[position]
            yield Segment(char, char, False)
            position += 1
        else:
            yield Segment(text[position : position + match.length], match.target, True)
            position += match.length


def replace_all(index: DictionaryIndex, text: str) -> str:
    """Run a single greedy longest-match pass of ``index`` over ``text``."""

    if not text or not len(index):
        return text
    return "".join(segment.target for segment in scan(index, text))


class Converter:
    """Ordered pipeline of dictionary passes.

    Each pass runs once over the output of the previous one; the result is not
    fed back in, so ``a -> b`` followed by ``b -> c`` turns ``a`` into ``c`` but
    a single ``a -> b, b -> c`` pass turns ``a`` into ``b``.
    """

    __slots__ = ("_passes",)

    def __init__(self, indexes: Iterable[DictionaryIndex] = ()) -> None:
        self._passes: Tuple[DictionaryIndex, ...] = tuple(indexes)

    @classmethod
    def from_index(cls, index: DictionaryIndex) -> "Converter":
        return cls((index,))

    @property
    def passes(self) -> Tuple[DictionaryIndex, ...]:
        return self._passes

    def convert(self, text: str) -> str:
        for index in self._passes:
            text = replace_all(index, text)
        return text

    def __call__(self, text: str) -> str:
        return self.convert(text)

    def __len__(self) -> int:
        return len(self._passes)

    def __repr__(self) -> str:
        return f"Converter(passes={list(self._passes)!r})"
