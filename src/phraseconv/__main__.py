from __future__ import annotations

import sys
from typing import Sequence

import yaml

from .builtin import BUILTIN_DICTIONARIES, get_builtin
from .cli import parse_args
from .config import AppConfig, build_config
from .converter import Converter
from .dictionary import load_index
from .index import DictionaryIndex
from .logging_utils import RichLogger


def log_pass(logger: RichLogger, label: str, index: DictionaryIndex, names: str) -> None:
    logger.log_panel(
        f"{label}: {len(index)} phrases (longest {index.max_length}) from {names}",
        "INFO",
        "cyan",
    )
    if index.skipped:
        logger.log_panel(
            f"{label}: skipped {index.skipped} entries with an empty source phrase",
            "WARN",
            "yellow",
        )


def build_converter(config: AppConfig, logger: RichLogger) -> Converter:
    if config.builtin:
        converter = get_builtin(config.builtin, config.dictionary_dir)
        files = ", ".join(BUILTIN_DICTIONARIES[config.builtin])
        logger.log_panel(
            f"Loaded built-in '{config.builtin}' from {config.dictionary_dir}",
            "INFO",
            "cyan",
        )
        for number, index in enumerate(converter.passes, start=1):
            log_pass(logger, f"Pass {number}", index, files)
        return converter

    indexes = []
    for number, files in enumerate(config.passes, start=1):
        index = load_index(files)
        log_pass(logger, f"Pass {number}", index, ", ".join(path.name for path in files))
        indexes.append(index)
    return Converter(indexes)


def read_input(config: AppConfig) -> str:
    if config.input_path is None:
        return sys.stdin.read()
    return config.input_path.read_text(encoding=config.encoding)


def write_output(config: AppConfig, text: str) -> None:
    if config.output_path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    # Encode before opening so an unencodable text leaves no partial file.
    data = text.encode(config.encoding)
    config.output_path.write_bytes(data)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logger = RichLogger(quiet=bool(args.quiet))

    try:
        config = build_config(args)
        logger = RichLogger(log_file=config.log_file, quiet=config.quiet)
        converter = build_converter(config, logger)
        text = read_input(config)
        converted = converter.convert(text)
        write_output(config, converted)
    except (OSError, LookupError, ValueError, yaml.YAMLError) as error:
        logger.log_exception(error)
        return 2

    logger.log_text(f"Converted {len(text)} characters through {len(converter)} pass(es)")
    if config.output_path is not None:
        logger.log_panel(f"Converted text written to {config.output_path}", "LOG", "bold green")
    return 0


if __name__ == "__main__":
    sys.exit(main())
