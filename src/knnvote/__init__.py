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

"""k-nearest-neighbour majority-vote classifier.

Loads comma-delimited labelled feature files, classifies vectors by the most
frequent label among their k nearest training points under Euclidean distance,
and reports held-out accuracy."""

from __future__ import annotations

from .core import (
    EvaluationSummary,
    LabeledVector,
    accuracy,
    classify,
    euclidean_distance,
    evaluate,
    load_dataset,
    parse_record,
    parse_vector,
    write_dataset,
)
from .errors import (
    DatasetIOError,
    DimensionMismatchError,
    FormatError,
    InvalidArgumentError,
    KnnError,
)

__version__ = "0.1.0"

__all__ = [
    "DatasetIOError",
    "DimensionMismatchError",
    "EvaluationSummary",
    "FormatError",
    "InvalidArgumentError",
    "KnnError",
    "LabeledVector",
    "accuracy",
    "classify",
    "euclidean_distance",
    "evaluate",
    "load_dataset",
    "parse_record",
    "parse_vector",
    "write_dataset",
]
