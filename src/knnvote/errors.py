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

"""Exception taxonomy shared by the loader, classifier and CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class KnnError(Exception):
    """Base class for every error raised by :mod:`knnvote`."""


class FormatError(KnnError):
    """Raised when a token cannot be parsed as a real number.

    :ivar token: Offending token, verbatim.
    :ivar path: Source file, when the token came from a dataset file.
    :ivar line_number: 1-based line number inside ``path``.
    """

    def __init__(
        self,
        token: str,
        *,
        path: Optional[Path | str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        self.token = token
        self.path = Path(path) if path is not None else None
        self.line_number = line_number
        super().__init__(self._render())

    def _render(self) -> str:
        message = f"could not parse {self.token!r} as a number"
        if self.path is not None and self.line_number is not None:
            return f"{self.path}:{self.line_number}: {message}"
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message

    def at(self, *, path: Path | str, line_number: int) -> "FormatError":
        """Return a copy of this error annotated with its source location."""

        return FormatError(self.token, path=path, line_number=line_number)


class DatasetIOError(KnnError):
    """Raised when a dataset file is missing or cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class DimensionMismatchError(KnnError):
    """Raised when two feature vectors of unequal length are compared."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected a vector with {expected} feature(s), got {actual}"
        )


class InvalidArgumentError(KnnError):
    """Raised for invalid ``k`` values and empty datasets."""


__all__ = [
    "DatasetIOError",
    "DimensionMismatchError",
    "FormatError",
    "InvalidArgumentError",
    "KnnError",
]
