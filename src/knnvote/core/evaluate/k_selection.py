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

"""Neighbourhood sweep utilities for the evaluator."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from ...errors import FormatError, InvalidArgumentError
from ..data import LabeledVector
from .metrics import accuracy


def parse_k_values(k_default: int, sweep: str, *, max_k: Optional[int] = None) -> List[int]:
    """
    Derive the sorted set of ``k`` values requested for evaluation.

    :param k_default: Primary ``k``; always part of the result when positive.
    :param sweep: Comma-delimited string of additional ``k`` candidates.
    :param max_k: Optional upper bound, typically the training-set size; larger
        values are dropped.
    :returns: Strictly positive ``k`` values in ascending order.
    :raises FormatError: If a token is not an integer.
    """

    values = {int(k_default)}
    for token in sweep.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            values.add(int(token))
        except ValueError as exc:
            raise FormatError(token) from exc
    return sorted(k for k in values if k > 0 and (max_k is None or k <= max_k))


def accuracy_by_k(
    train: Sequence[LabeledVector],
    test: Sequence[LabeledVector],
    k_values: Sequence[int],
) -> Dict[int, float]:
    """Return the accuracy percentage observed for each ``k`` in ``k_values``."""

    return {k: accuracy(train, test, k) for k in k_values}


def select_best_k(k_values: Sequence[int], accuracies: Mapping[int, float]) -> int:
    """
    Pick the accuracy-maximising ``k``.

    :param k_values: Evaluated ``k`` values.
    :param accuracies: Observed accuracy for each ``k``.
    :returns: Best ``k``; ties resolve to the smallest value.
    :raises InvalidArgumentError: If ``k_values`` is empty.
    """

    if not k_values:
        raise InvalidArgumentError("no k values to select from")
    return min(k_values, key=lambda k: (-accuracies.get(k, 0.0), k))


__all__ = ["accuracy_by_k", "parse_k_values", "select_best_k"]
