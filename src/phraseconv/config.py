from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

import yaml
from dotenv import load_dotenv

DICT_DIR_ENV = "PHRASECONV_DICT_DIR"
DEFAULT_DICT_DIR = Path("OpenCC") / "data" / "dictionary"


@dataclass(slots=True)
class AppConfig:
    """Container for user configurable runtime options."""

    passes: List[List[Path]] = field(default_factory=list)
    builtin: Optional[str] = None
    dictionary_dir: Path = DEFAULT_DICT_DIR
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    encoding: str = "utf-8"
    log_file: Optional[Path] = None
    quiet: bool = False


def load_environment() -> None:
    """Load environment variables from .env files if present."""

    load_dotenv(override=False)


def default_dictionary_dir() -> Path:
    load_environment()
    configured = os.getenv(DICT_DIR_ENV)
    if configured:
        return Path(configured).expanduser()
    return DEFAULT_DICT_DIR


def resolve_dictionary(name: str | Path, *search_dirs: Path) -> Path:
    """Find a dictionary file as given, or relative to each of ``search_dirs``."""

    candidate = Path(name).expanduser()
    if candidate.is_file():
        return candidate
    if not candidate.is_absolute():
        for directory in search_dirs:
            located = directory / candidate
            if located.is_file():
                return located
    raise FileNotFoundError(f"Dictionary file not found: {name}")


def _pass_files(item: Any, position: int) -> List[str]:
    if isinstance(item, str) and item.strip():
        return [item]
    if isinstance(item, list) and item and all(isinstance(name, str) and name.strip() for name in item):
        return list(item)
    raise ValueError(
        f"Pass #{position} must be a dictionary filename or a non-empty list of filenames, got {item!r}"
    )


def load_pipeline_config(path: Path, dictionary_dir: Optional[Path] = None) -> List[List[Path]]:
    """Read the ordered conversion passes from a YAML pipeline file.

    Example::

        name: s2tw
        passes:
          - [STPhrases.txt, STCharacters.txt]
          - TWVariants.txt
    """

    path = Path(path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Pipeline config not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)

    if not isinstance(data, dict) or "passes" not in data:
        raise ValueError(f"Pipeline config {path} must be a mapping with a 'passes' list")
    raw_passes = data["passes"]
    if not isinstance(raw_passes, list) or not raw_passes:
        raise ValueError(f"Pipeline config {path} must list at least one pass")

    search_dirs = [path.parent]
    if dictionary_dir is not None:
        search_dirs.append(dictionary_dir)
    return [
        [resolve_dictionary(name, *search_dirs) for name in _pass_files(item, position)]
        for position, item in enumerate(raw_passes, start=1)
    ]


def _split_pass(value: str) -> List[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def build_config(args) -> AppConfig:
    """Create an :class:`AppConfig` instance from parsed CLI arguments."""

    dict_dir_arg = getattr(args, "dict_dir", None)
    dictionary_dir = Path(dict_dir_arg).expanduser() if dict_dir_arg else default_dictionary_dir()

    passes: List[List[Path]] = []
    for value in getattr(args, "dictionary", None) or []:
        names = _split_pass(value)
        if not names:
            raise ValueError("--dictionary requires at least one filename")
        passes.append([resolve_dictionary(name, dictionary_dir) for name in names])

    config_path = getattr(args, "config", None)
    if config_path:
        passes.extend(load_pipeline_config(Path(config_path), dictionary_dir))

    builtin = getattr(args, "builtin", None)
    if builtin and passes:
        raise ValueError("--builtin cannot be combined with --dictionary or --config")
    if not builtin and not passes:
        raise ValueError("No conversion configured. Pass --builtin, --dictionary or --config.")

    input_path: Optional[Path] = None
    if getattr(args, "input", None):
        input_path = Path(args.input).expanduser()
        if not input_path.is_file():
            raise FileNotFoundError(f"Input file not found: {input_path}")

    output_path: Optional[Path] = None
    if getattr(args, "output", None):
        output_path = Path(args.output).expanduser()
        output_path.parent.mkdir(parents=True, exist_ok=True)

    log_file: Optional[Path] = None
    if getattr(args, "log_file", None):
        log_file = Path(args.log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)

    return AppConfig(
        passes=passes,
        builtin=builtin,
        dictionary_dir=dictionary_dir,
        input_path=input_path,
        output_path=output_path,
        encoding=getattr(args, "encoding", "utf-8") or "utf-8",
        log_file=log_file,
        quiet=bool(getattr(args, "quiet", False)),
    )
