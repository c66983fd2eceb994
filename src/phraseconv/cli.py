from __future__ import annotations

import argparse
from typing import Sequence

from .builtin import BUILTIN_DICTIONARIES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phraseconv",
        description=(
            "Convert text between script variants (e.g. Simplified/Traditional Chinese) "
            "by greedy longest-match substitution against OpenCC style phrase dictionaries."
        ),
    )
    parser.add_argument(
        "-d",
        "--dictionary",
        action="append",
        metavar="FILES",
        help=(
            "Dictionary file(s) for one conversion pass. Separate several files with commas "
            "to merge them into a single pass; repeat the option to chain passes in order."
        ),
    )
    parser.add_argument(
        "--builtin",
        choices=sorted(BUILTIN_DICTIONARIES),
        help="Use a built-in OpenCC conversion loaded from the dictionary directory.",
    )
    parser.add_argument(
        "--config",
        help="YAML pipeline file listing the conversion passes.",
    )
    parser.add_argument(
        "--dict-dir",
        help=(
            "Directory holding dictionary files. Defaults to $PHRASECONV_DICT_DIR "
            "or ./OpenCC/data/dictionary."
        ),
    )
    parser.add_argument(
        "-i",
        "--input",
        help="File to convert. Reads standard input when omitted.",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="File to write the converted text to. Writes to standard output when omitted.",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the input and output files.",
    )
    parser.add_argument(
        "--log-file",
        help="Optional path to a file where log messages are appended.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report errors on the console.",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(argv)
