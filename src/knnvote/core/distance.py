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

"""Euclidean distance between feature vectors."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..errors import DimensionMismatchError


def euclidean_distance(first: Sequence[float], second: Sequence[float]) -> float:
    """
    Return the Euclidean (L2) distance between two equal-length vectors.

    Arithmetic is float64 throughout; NaN and infinite inputs propagate
    according to IEEE rules.

    :param first: Reference vector.
    :param second: Vector compared against ``first``.
    :returns: Square root of the summed squared differences.
    :raises DimensionMismatchError: If the vectors differ in length.
    """

    if len(first) != len(second):
        raise DimensionMismatchError(expected=len(first), actual=len(second))
    lhs = np.asarray(first, dtype=np.float64)
    rhs = np.asarray(second, dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        return float(np.sqrt(np.sum((lhs - rhs) ** 2)))


__all__ = ["euclidean_distance"]
