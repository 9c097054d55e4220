"""
Command-line interface.

Usage:
    lexshift pluralize person octopus
    lexshift camelize --lower active_model/errors
    lexshift parameterize --separator _ "Donald E. Knuth"
    echo "HTMLTidy" | lexshift underscore

Extra rules can come from a YAML file passed with --config, or named by the
LEXSHIFT_CONFIG environment variable.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from .errors import InflectionError
from .inflection import InflectionEngine, load_inflections, ordinalize, transliterate
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LEXSHIFT_CONFIG"


def _operations(engine: InflectionEngine, args: argparse.Namespace) -> dict[str, Callable[[str], str]]:
    return {
        "pluralize": lambda word: engine.pluralize(word, args.count),
        "singularize": engine.singularize,
        "camelize": lambda word: engine.camelize(word, not args.lower),
        "underscore": engine.underscore,
        "dasherize": engine.dasherize,
        "humanize": engine.humanize,
        "titleize": engine.titleize,
        "tableize": engine.tableize,
        "classify": engine.classify,
        "foreign-key": engine.foreign_key,
        "demodulize": engine.demodulize,
        "deconstantize": engine.deconstantize,
        "parameterize": lambda word: engine.parameterize(word, args.separator),
        "transliterate": transliterate,
        "ordinalize": lambda word: ordinalize(int(word)),
    }


OPERATIONS = (
    "pluralize",
    "singularize",
    "camelize",
    "underscore",
    "dasherize",
    "humanize",
    "titleize",
    "tableize",
    "classify",
    "foreign-key",
    "demodulize",
    "deconstantize",
    "parameterize",
    "transliterate",
    "ordinalize",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexshift",
        description="Inflect words and convert identifiers between naming conventions",
    )
    parser.add_argument("operation", choices=OPERATIONS, help="Transform to apply")
    parser.add_argument(
        "words",
        nargs="*",
        help="Words to transform (default: one per line from stdin)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Count for pluralize; 1 leaves the word unchanged",
    )
    parser.add_argument(
        "--separator",
        default="-",
        help="Separator for parameterize (default: -)",
    )
    parser.add_argument(
        "--lower",
        action="store_true",
        help="camelize with a lowercase first letter",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"YAML file with extra inflection rules (default: ${CONFIG_ENV_VAR})",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for daily-rotated log files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command-line tool.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 on a configuration or input error
    """
    args = build_parser().parse_intermixed_args(argv)

    setup_logging(
        log_dir=args.log_dir,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    engine = InflectionEngine()
    config = args.config or os.environ.get(CONFIG_ENV_VAR)
    if config:
        try:
            load_inflections(config, engine)
        except InflectionError as exc:
            logger.error(f"Could not load inflection config: {exc}")
            return 1

    operation = _operations(engine, args)[args.operation]
    words = args.words or [line.rstrip("\n") for line in sys.stdin]

    for word in words:
        try:
            print(operation(word))
        except ValueError as exc:
            logger.error(f"Cannot {args.operation} {word!r}: {exc}")
            return 1
    return 0
