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

"""Core data, distance, classification and evaluation routines."""

from __future__ import annotations

from .classifier import classify, nearest_neighbours, tally_votes, validate_k
from .data import (
    Dataset,
    LabeledVector,
    format_record,
    load_dataset,
    parse_record,
    parse_vector,
    write_dataset,
)
from .distance import euclidean_distance
from .evaluate import (
    EvaluationSummary,
    accuracy,
    accuracy_by_k,
    evaluate,
    parse_k_values,
    select_best_k,
)

__all__ = [
    "Dataset",
    "EvaluationSummary",
    "LabeledVector",
    "accuracy",
    "accuracy_by_k",
    "classify",
    "euclidean_distance",
    "evaluate",
    "format_record",
    "load_dataset",
    "nearest_neighbours",
    "parse_k_values",
    "parse_record",
    "parse_vector",
    "select_best_k",
    "tally_votes",
    "validate_k",
]
