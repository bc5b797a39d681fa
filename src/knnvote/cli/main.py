#!/usr/bin/env python
# Copyright 2025 The Grail Simulation Contributors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line interface for the k-nearest-neighbour classifier."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, TextIO

from ..core.classifier import classify
from ..core.data import load_dataset, parse_vector
from ..core.evaluate import accuracy, accuracy_by_k, parse_k_values, select_best_k
from ..errors import DatasetIOError, FormatError, InvalidArgumentError, KnnError
from .utils import (
    EXIT_OK,
    LOG_LEVELS,
    configure_logging,
    describe_error,
    read_console_line,
)

LOGGER = logging.getLogger("knnvote.cli")

PROG = "knn-vote"
USAGE = f"Usage: {PROG} <k> <train_file> <test_file>"
VECTOR_PROMPT = "Enter a new feature vector separated by commas: "
LOG_LEVEL_ENV = "KNNVOTE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


class UsageError(Exception):
    """Raised when the command line does not match the expected shape."""


class _UsageParser(argparse.ArgumentParser):
    """Parser that reports malformed invocations instead of exiting with code 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


@dataclass(frozen=True)
class RunConfig:
    """
    Validated settings for a single CLI run.

    :ivar k: Neighbour count.
    :vartype k: int
    :ivar train_path: Training dataset file.
    :vartype train_path: Path
    :ivar test_path: Held-out dataset file.
    :vartype test_path: Path
    :ivar k_sweep: Optional comma-separated extra ``k`` values to report.
    :vartype k_sweep: str
    :ivar log_level: Name of the log level for the ``knnvote`` loggers.
    :vartype log_level: str
    """

    k: int
    train_path: Path
    test_path: Path
    k_sweep: str = ""
    log_level: str = DEFAULT_LOG_LEVEL


def build_parser() -> argparse.ArgumentParser:
    """
    Build the parser for ``knn-vote K TRAIN_FILE TEST_FILE``.

    :returns: Parser whose :meth:`~argparse.ArgumentParser.error` raises
        :class:`UsageError`.
    """

    parser = _UsageParser(
        prog=PROG,
        description="Classify feature vectors by majority vote of the k nearest neighbours.",
    )
    # k stays a string so a non-integer value is reported as a format error.
    parser.add_argument("k", help="Number of neighbours consulted per classification.")
    parser.add_argument("train_file", help="Comma-delimited training dataset.")
    parser.add_argument("test_file", help="Comma-delimited held-out dataset.")
    parser.add_argument(
        "--k-sweep",
        "--k_sweep",
        default="",
        dest="k_sweep",
        help="Comma-separated extra k values whose accuracy is also reported.",
    )
    parser.add_argument(
        "--log-level",
        "--log_level",
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        dest="log_level",
        help=f"Logging verbosity written to stderr (env: {LOG_LEVEL_ENV}).",
    )
    return parser


def _parse_k(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise FormatError(raw) from exc


def _existing_file(raw: str) -> Path:
    path = Path(raw)
    if not path.is_file():
        raise DatasetIOError(path, "file not found")
    return path


def parse_config(argv: Optional[Sequence[str]] = None) -> RunConfig:
    """
    Parse and validate ``argv`` into a :class:`RunConfig`.

    :param argv: Argument vector; ``None`` reads :data:`sys.argv`.
    :returns: Validated configuration.
    :raises UsageError: If the positional arguments are missing or extra.
    :raises FormatError: If ``k`` is not an integer.
    :raises DatasetIOError: If either dataset path is not an existing file.
    :raises InvalidArgumentError: If the log level is unknown.
    """

    args = build_parser().parse_args(argv)
    k = _parse_k(args.k)
    log_level = str(args.log_level).strip().upper()
    if log_level not in LOG_LEVELS:
        raise InvalidArgumentError(f"unknown log level {args.log_level!r}")
    return RunConfig(
        k=k,
        train_path=_existing_file(args.train_file),
        test_path=_existing_file(args.test_file),
        k_sweep=args.k_sweep,
        log_level=log_level,
    )


def run(
    config: RunConfig,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    """
    Report test accuracy, then classify one vector read from the console.

    :param config: Validated run settings.
    :param stdin: Console input (defaults to :data:`sys.stdin`).
    :param stdout: Console output (defaults to :data:`sys.stdout`).
    :returns: Label predicted for the console vector.
    """

    stdout = stdout if stdout is not None else sys.stdout
    train_set = load_dataset(config.train_path)
    test_set = load_dataset(config.test_path)

    # Sweep values above the training-set size are dropped.
    k_values = (
        parse_k_values(config.k, config.k_sweep, max_k=len(train_set))
        if config.k_sweep
        else []
    )

    acc = accuracy(train_set, test_set, config.k)
    print(f"The accuracy is: {acc}%", file=stdout)

    if k_values:
        scores = accuracy_by_k(train_set, test_set, k_values)
        for k_val in k_values:
            print(f"k={k_val} accuracy={scores[k_val]}%", file=stdout)
        print(f"Best k: {select_best_k(k_values, scores)}", file=stdout)

    line = read_console_line(VECTOR_PROMPT, stdin=stdin, stdout=stdout)
    label = classify(train_set, parse_vector(line), config.k)
    print(f"The class of the feature vector is: {label}", file=stdout)
    return label


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Run the CLI and translate failures into a message and exit code.

    :param argv: Optional argument vector supplied for testing. When ``None``,
        :data:`sys.argv` is used verbatim.
    :param stdin: Console input stream.
    :param stdout: Stream receiving results and diagnostics.
    :returns: ``0`` on success or after printing usage, otherwise the exit
        code mapped by :func:`~knnvote.cli.utils.describe_error`.
    """

    stdout = stdout if stdout is not None else sys.stdout
    try:
        config = parse_config(argv)
        configure_logging(config.log_level)
        run(config, stdin=stdin, stdout=stdout)
    except UsageError as exc:
        LOGGER.debug("Rejected command line: %s", exc)
        print(USAGE, file=stdout)
        return EXIT_OK
    except KnnError as exc:
        message, exit_code = describe_error(exc)
        print(message, file=stdout)
        return exit_code
    except Exception as exc:  # pylint: disable=broad-except
        LOGGER.exception("Unexpected failure")
        message, exit_code = describe_error(exc)
        print(message, file=stdout)
        return exit_code
    return EXIT_OK


def main_entry() -> None:
    """Console-script entry point."""

    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
