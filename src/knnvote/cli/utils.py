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

"""Logging, console and error-reporting helpers for the CLI entry point."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Tuple, Type

from ..errors import (
    DatasetIOError,
    DimensionMismatchError,
    FormatError,
    InvalidArgumentError,
)

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_FORMAT_ERROR = 3
EXIT_IO_ERROR = 4
EXIT_DIMENSION_MISMATCH = 5
EXIT_INVALID_ARGUMENT = 6

_ERROR_TABLE: Tuple[Tuple[Type[Exception], str, int], ...] = (
    (FormatError, "Please enter numeric values correctly", EXIT_FORMAT_ERROR),
    (DatasetIOError, "Error reading file", EXIT_IO_ERROR),
    (DimensionMismatchError, "Dimension mismatch", EXIT_DIMENSION_MISMATCH),
    (InvalidArgumentError, "Invalid argument", EXIT_INVALID_ARGUMENT),
)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """
    Attach a stderr stream handler to the ``knnvote`` logger hierarchy.

    Repeated calls only update the level; a second handler is never added.

    :param level: Log level applied to the package logger.
    :returns: The package logger.
    """

    logger = logging.getLogger("knnvote")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def read_console_line(
    prompt: str,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> str:
    """
    Write ``prompt`` and read exactly one line of input.

    :param prompt: Text shown before reading.
    :param stdin: Input stream (defaults to :data:`sys.stdin`).
    :param stdout: Output stream for the prompt (defaults to :data:`sys.stdout`).
    :returns: The line without its terminator; ``""`` at end of input.
    """

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stdout.write(prompt)
    stdout.flush()
    return stdin.readline().rstrip("\r\n")


def describe_error(exc: Exception) -> Tuple[str, int]:
    """
    Map ``exc`` to the one-line message and exit code reported to the user.

    :param exc: Exception caught at the top level.
    :returns: ``(message, exit_code)``. Exceptions outside the known taxonomy
        map to a generic message and :data:`EXIT_UNEXPECTED`.
    """

    for error_type, prefix, exit_code in _ERROR_TABLE:
        if isinstance(exc, error_type):
            return f"{prefix}: {exc}", exit_code
    return f"An error occurred: {exc}", EXIT_UNEXPECTED


__all__ = [
    "EXIT_DIMENSION_MISMATCH",
    "EXIT_FORMAT_ERROR",
    "EXIT_INVALID_ARGUMENT",
    "EXIT_IO_ERROR",
    "EXIT_OK",
    "EXIT_UNEXPECTED",
    "LOG_FORMAT",
    "LOG_LEVELS",
    "configure_logging",
    "describe_error",
    "read_console_line",
]
