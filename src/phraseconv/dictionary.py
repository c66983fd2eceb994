from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .index import DictionaryIndex

Entry = Tuple[str, str]
PathLike = Union[str, Path]

_BOM = "\ufeff"


def parse_line(line: str) -> Optional[Entry]:
    """Parse one ``source<TAB>target [alternative ...]`` rule.

    Only the first space separated alternative of the target column is kept.
    Lines without a tab yield ``None``.
    """

    line = line.rstrip("\r\n")
    if "\t" not in line:
        return None
    source, targets = line.split("\t", 1)
    return source, targets.split(" ", 1)[0]


def iter_entries(lines: Iterable[str]) -> Iterator[Entry]:
    for line in lines:
        entry = parse_line(line)
        if entry is not None:
            yield entry


def _strip_bom(text: str) -> str:
    return text[1:] if text.startswith(_BOM) else text


def _decoded_lines(path: Path) -> Iterator[str]:
    with path.open("rb") as handle:
        first = True
        for raw in handle:
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                first = False
                continue
            yield _strip_bom(line) if first else line
            first = False


def load_entries(path: PathLike) -> List[Entry]:
    """Read all rules from a dictionary file, skipping lines that are not valid UTF-8."""

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    return list(iter_entries(_decoded_lines(path)))


def load_index(paths: Sequence[PathLike]) -> DictionaryIndex:
    """Merge several dictionary files, in order, into a single index."""

    entries: List[Entry] = []
    for path in paths:
        entries.extend(load_entries(path))
    return DictionaryIndex.build(entries)


def load_string(text: str) -> DictionaryIndex:
    return DictionaryIndex.build(iter_entries(_strip_bom(text).split("\n")))
