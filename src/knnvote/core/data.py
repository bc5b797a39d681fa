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

"""Record parsing and dataset loading for comma-delimited feature files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence, Tuple

from ..errors import DatasetIOError, FormatError

LOGGER = logging.getLogger("knnvote.data")

FIELD_SEPARATOR = ","
FILE_ENCODING = "utf-8"
# Tolerates the byte-order mark written by spreadsheet CSV exports.
READ_ENCODING = "utf-8-sig"

_NUMBER_PATTERN = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:nan|inf|infinity)",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class LabeledVector:
    """
    Immutable training or test example.

    :ivar label: Class identifier, kept verbatim from the source line.
    :vartype label: str
    :ivar features: Ordered feature values.
    :vartype features: Tuple[float, ...]
    """

    label: str
    features: Tuple[float, ...]

    @property
    def dimension(self) -> int:
        """Number of features carried by the vector."""

        return len(self.features)


Dataset = Tuple[LabeledVector, ...]


def _parse_number(token: str) -> float:
    # Decimal notation plus nan/inf spellings; no digit-grouping underscores.
    if not _NUMBER_PATTERN.fullmatch(token.strip()):
        raise FormatError(token)
    return float(token)


def parse_vector(text: str) -> Tuple[float, ...]:
    """
    Parse a label-less comma-separated line into feature values.

    :param text: Raw line, e.g. console input such as ``"1.0, 2.5"``.
    :returns: Parsed feature tuple.
    :raises FormatError: If any token is not a real number. An empty line is a
        single empty token and therefore fails as well.
    """

    return tuple(_parse_number(token) for token in text.split(FIELD_SEPARATOR))


def parse_record(line: str) -> LabeledVector:
    """
    Convert one delimited line into a :class:`LabeledVector`.

    All tokens but the last must parse as real numbers; the last token is the
    label and is kept exactly as written (no trimming, case preserved). A line
    holding a single token yields a vector with no features.

    :param line: Line content without its terminator.
    :returns: Parsed labelled vector.
    :raises FormatError: If a feature token is not numeric.
    """

    *feature_tokens, label = line.split(FIELD_SEPARATOR)
    features = tuple(_parse_number(token) for token in feature_tokens)
    return LabeledVector(label=label, features=features)


def _iter_lines(handle: Iterable[str]) -> Iterable[Tuple[int, str]]:
    for line_number, raw in enumerate(handle, start=1):
        yield line_number, raw.removesuffix("\n")


def load_dataset(path: Path | str) -> Dataset:
    """
    Read every record of ``path`` in file order.

    Zero-length lines are skipped rather than parsed as empty-label records.
    Nothing is returned unless the whole file parses.

    :param path: Location of the comma-delimited dataset.
    :returns: Tuple of parsed records.
    :raises DatasetIOError: If the file is missing or unreadable.
    :raises FormatError: If a line fails to parse; annotated with the path and
        line number.
    """

    source = Path(path)
    records = []
    try:
        with source.open("r", encoding=READ_ENCODING) as handle:
            for line_number, line in _iter_lines(handle):
                if not line:
                    continue
                try:
                    records.append(parse_record(line))
                except FormatError as exc:
                    raise exc.at(path=source, line_number=line_number) from exc
    except FileNotFoundError as exc:
        raise DatasetIOError(source, "file not found") from exc
    except PermissionError as exc:
        raise DatasetIOError(source, "permission denied") from exc
    except IsADirectoryError as exc:
        raise DatasetIOError(source, "is a directory") from exc
    except UnicodeDecodeError as exc:
        raise DatasetIOError(source, f"not valid {FILE_ENCODING} text") from exc
    except OSError as exc:
        raise DatasetIOError(source, exc.strerror or str(exc)) from exc

    LOGGER.info("Loaded %d record(s) from %s", len(records), source)
    return tuple(records)


def format_record(record: LabeledVector) -> str:
    """Render ``record`` in the delimited file format."""

    tokens = [repr(float(value)) for value in record.features]
    tokens.append(record.label)
    return FIELD_SEPARATOR.join(tokens)


def write_dataset(path: Path | str, dataset: Sequence[LabeledVector]) -> Path:
    """
    Write ``dataset`` to ``path`` so that :func:`load_dataset` reloads it exactly.

    :param path: Destination file; parent directories are created.
    :param dataset: Records to persist, in order.
    :returns: The written path.
    :raises DatasetIOError: If the destination cannot be written.
    """

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding=FILE_ENCODING, newline="\n") as handle:
            for record in dataset:
                handle.write(format_record(record))
                handle.write("\n")
    except OSError as exc:
        raise DatasetIOError(target, exc.strerror or str(exc)) from exc
    LOGGER.info("Wrote %d record(s) to %s", len(dataset), target)
    return target


__all__ = [
    "Dataset",
    "FIELD_SEPARATOR",
    "LabeledVector",
    "format_record",
    "load_dataset",
    "parse_record",
    "parse_vector",
    "write_dataset",
]
