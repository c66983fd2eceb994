"""Built-in OpenCC conversions loaded on first use."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Tuple

from .config import default_dictionary_dir
from .converter import Converter
from .dictionary import load_index

# Character tables come first so that phrase rules override them.
BUILTIN_DICTIONARIES: Dict[str, Tuple[str, ...]] = {
    "s2t": ("STCharacters.txt", "STPhrases.txt"),
    "t2s": ("TSCharacters.txt", "TSPhrases.txt"),
}


@lru_cache(maxsize=None)
def _load_builtin(name: str, directory: Path) -> Converter:
    files = [directory / filename for filename in BUILTIN_DICTIONARIES[name]]
    return Converter.from_index(load_index(files))


def get_builtin(name: str, directory: Optional[Path] = None) -> Converter:
    """Return the shared converter for a built-in conversion such as ``s2t``."""

    key = name.lower()
    if key not in BUILTIN_DICTIONARIES:
        available = ", ".join(sorted(BUILTIN_DICTIONARIES))
        raise ValueError(f"Unknown built-in dictionary '{name}'. Available: {available}")
    if directory is None:
        directory = default_dictionary_dir()
    return _load_builtin(key, Path(directory).expanduser().resolve())


def clear_cache() -> None:
    _load_builtin.cache_clear()
