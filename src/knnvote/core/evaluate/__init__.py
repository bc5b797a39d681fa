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

"""Top-level exports for the evaluation helpers."""

from __future__ import annotations

from .k_selection import accuracy_by_k, parse_k_values, select_best_k
from .metrics import EvaluationSummary, accuracy, evaluate

__all__ = [
    "EvaluationSummary",
    "accuracy",
    "accuracy_by_k",
    "evaluate",
    "parse_k_values",
    "select_best_k",
]
