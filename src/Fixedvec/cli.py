"""
Fixedvec interactive menu
=========================

Reads two vectors from standard input and applies the elementwise
operations to them:

    fixedvec --dimension 3 --dtype int64
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Iterator, TextIO

import numpy as np

from . import promotion
from .errors import DivideByZeroError
from .util import parse_number
from .vector import FixedVector, vector_type

logger = logging.getLogger(__name__)

MENU = """
=== Vector operations ===
1. Enter vectors
2. Add vectors
3. Subtract vectors
4. Multiply vectors by a scalar
5. Divide vectors by a scalar
6. Show current vectors
0. Exit
Choose an option: """


@dataclass(frozen=True)
class CliConfig:
    """Settings of the interactive menu."""

    dimension: int = 3
    dtype: np.dtype = field(default_factory=lambda: np.dtype(np.float64))
    log_level: str = "WARNING"


class TokenReader:
    """Whitespace separated tokens of a text stream, across line breaks."""

    def __init__(self, stream: TextIO):
        self._tokens = self._iter_tokens(stream)

    @staticmethod
    def _iter_tokens(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("end of input") from None


def _read_vector(
    reader: TokenReader, out: TextIO, name: str, vec_type: type[FixedVector]
) -> FixedVector:
    out.write(f"Enter {name} ({vec_type.dimension} values): ")
    out.flush()
    return vec_type([parse_number(reader.next()) for _ in range(vec_type.dimension)])


def _read_scalar(reader: TokenReader, out: TextIO):
    out.write("Enter a scalar: ")
    out.flush()
    return parse_number(reader.next())


def run_menu(config: CliConfig, stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the exit option or the end of input.

    Returns
    -------
    int
        Process exit code.
    """
    reader = TokenReader(stdin)
    vec_type = vector_type(config.dtype, config.dimension)

    def say(text: str) -> None:
        stdout.write(text + "\n")

    v1: FixedVector | None = None
    v2: FixedVector | None = None

    while True:
        stdout.write(MENU)
        stdout.flush()
        try:
            token = reader.next()
        except EOFError:
            say("")
            return 0

        try:
            choice = int(token)
        except ValueError:
            say("Invalid option, try again.")
            continue

        if choice in (2, 3, 4, 5, 6) and (v1 is None or v2 is None):
            say("Please enter the vectors first!")
            continue

        try:
            match choice:
                case 1:
                    try:
                        new_v1 = _read_vector(reader, stdout, "vector 1", vec_type)
                        new_v2 = _read_vector(reader, stdout, "vector 2", vec_type)
                    except (ValueError, OverflowError) as exc:
                        logger.warning("Rejected vector input: %s", exc)
                        say(f"Invalid number: {exc}")
                        continue
                    v1, v2 = new_v1, new_v2
                    logger.info("Vectors set to %s and %s", v1, v2)
                case 2:
                    say(f"v1 + v2 = {v1 + v2}")
                case 3:
                    say(f"v1 - v2 = {v1 - v2}")
                case 4 | 5:
                    symbol = "*" if choice == 4 else "/"
                    try:
                        scalar = _read_scalar(reader, stdout)
                        if choice == 4:
                            r1, r2 = v1 * scalar, v2 * scalar
                        else:
                            r1, r2 = v1 / scalar, v2 / scalar
                    except (ValueError, OverflowError) as exc:
                        logger.warning("Rejected scalar input: %s", exc)
                        say(f"Invalid number: {exc}")
                        continue
                    except DivideByZeroError as exc:
                        say(f"Error: {exc}")
                        continue
                    say(f"v1 {symbol} scalar = {r1}")
                    say(f"v2 {symbol} scalar = {r2}")
                case 6:
                    say(f"Vector 1: {v1}")
                    say(f"Vector 2: {v2}")
                case 0:
                    say("Goodbye!")
                    return 0
                case _:
                    say("Invalid option, try again.")
        except EOFError:
            say("")
            return 0


def _dimension(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid dimension: {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"dimension must be positive, got {n}")
    return n


def _dtype(value: str) -> np.dtype:
    try:
        return promotion.as_dtype(value)
    except TypeError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def parse_args(argv: list[str] | None = None) -> CliConfig:
    parser = argparse.ArgumentParser(
        prog="fixedvec",
        description="Fixedvec - elementwise operations on two fixed-size vectors",
    )
    parser.add_argument(
        "-n",
        "--dimension",
        type=_dimension,
        default=3,
        help="Number of elements per vector (default: 3)",
    )
    parser.add_argument(
        "--dtype",
        type=_dtype,
        default=np.dtype(np.float64),
        help="Element type, e.g. int64 or float32 (default: float64)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level, messages go to stderr (default: WARNING)",
    )

    args = parser.parse_args(argv)

    return CliConfig(
        dimension=args.dimension, dtype=args.dtype, log_level=args.log_level
    )


def main(argv: list[str] | None = None) -> int:
    config = parse_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger.info(
        "Starting menu with dimension %d and dtype %s", config.dimension, config.dtype
    )
    return run_menu(config, sys.stdin, sys.stdout)
