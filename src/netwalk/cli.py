"""Command Line Interface for netwalk.

This module reads a puzzle from a file or stdin and either solves it or
converts it to another format.

The CLI supports the following commands:
    - solve: Compute the answer for puzzle part one or two
    - convert: Re-serialize a puzzle as text or JSON

The puzzle part defaults to the ``PUZZLE_PART`` environment variable and the
walk settings to ``NETWALK_MAX_STEPS`` and ``NETWALK_MAX_WORKERS``; command line
options take precedence.

Example Usage:
    python -m netwalk solve input.txt --part two
    PUZZLE_PART=two python -m netwalk solve input.txt
    python -m netwalk convert input.txt --to json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import PuzzlePart, WalkConfig
from .core.exceptions import (
    ConfigurationError,
    DuplicateResourceError,
    GraphOperationError,
    ValidationError,
)
from .core.serialization import SerializationRegistry
from .core.solver import solve

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Failures that end a computation without an answer
HANDLED_ERRORS = (ConfigurationError, DuplicateResourceError, GraphOperationError, ValidationError)


def read_input(source: str) -> str:
    """Read puzzle text from a path, or from stdin when ``source`` is ``-``.

    Raises:
        ValidationError: If the file does not exist or is not valid UTF-8.
    """
    try:
        if source == "-":
            return sys.stdin.read()
        path = Path(source)
        if not path.is_file():
            raise ValidationError(f"File not found: {source}")
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError(f"Input is not valid UTF-8: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netwalk", description="Walk left/right networks under cyclic instructions"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    solve_parser = subparsers.add_parser("solve", help="Compute a puzzle answer")
    solve_parser.add_argument("input", help="Puzzle file, or - for stdin")
    solve_parser.add_argument("--part", choices=[p.value for p in PuzzlePart], default=None)
    solve_parser.add_argument(
        "--format", dest="fmt", choices=SerializationRegistry.formats(), default="text"
    )
    solve_parser.add_argument("--max-steps", type=int, default=None, help="0 disables the bound")
    solve_parser.add_argument("--workers", type=int, default=None)

    convert_parser = subparsers.add_parser("convert", help="Re-serialize a puzzle")
    convert_parser.add_argument("input", help="Puzzle file, or - for stdin")
    convert_parser.add_argument(
        "--from", dest="source_fmt", choices=SerializationRegistry.formats(), default="text"
    )
    convert_parser.add_argument(
        "--to", dest="target_fmt", choices=SerializationRegistry.formats(), required=True
    )
    return parser


def run_solve(args: argparse.Namespace) -> int:
    part = PuzzlePart.parse(args.part) if args.part else PuzzlePart.from_env()

    overrides = {}
    if args.max_steps is not None:
        overrides["max_steps"] = args.max_steps or None
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    config = WalkConfig.from_env(**overrides)

    serializer = SerializationRegistry.get_serializer(args.fmt)
    puzzle = serializer.deserialize(read_input(args.input).encode("utf-8"))
    result = solve(puzzle, part, config)
    print(f"The result for puzzle part '{part.name.title()}' is: {result}")
    return 0


def run_convert(args: argparse.Namespace) -> int:
    source = SerializationRegistry.get_serializer(args.source_fmt)
    target = SerializationRegistry.get_serializer(args.target_fmt)
    puzzle = source.deserialize(read_input(args.input).encode("utf-8"))
    sys.stdout.write(target.serialize(puzzle).decode("utf-8"))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        if args.command == "solve":
            return run_solve(args)
        return run_convert(args)
    except HANDLED_ERRORS as e:
        logger.error(f"Computation aborted: {e}")
        return 1
