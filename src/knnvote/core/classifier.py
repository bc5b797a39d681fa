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

"""Majority-vote k-nearest-neighbour classification."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ..errors import InvalidArgumentError
from .data import LabeledVector
from .distance import euclidean_distance

LOGGER = logging.getLogger("knnvote.classifier")


def validate_k(k: int, train_size: int) -> int:
    """
    Check that ``k`` is usable against a training set of ``train_size`` rows.

    :param k: Requested neighbour count.
    :param train_size: Number of available training points.
    :returns: ``k`` as a plain ``int``.
    :raises InvalidArgumentError: If the training set is empty, ``k`` is not an
        integer, or ``k`` falls outside ``[1, train_size]``.
    """

    if train_size == 0:
        raise InvalidArgumentError("training set is empty")
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise InvalidArgumentError(f"k must be an integer, got {k!r}")
    if k <= 0:
        raise InvalidArgumentError(f"k must be positive, got {k}")
    if k > train_size:
        raise InvalidArgumentError(
            f"k={k} exceeds the number of training points ({train_size})"
        )
    return int(k)


def nearest_neighbours(
    train: Sequence[LabeledVector],
    query: Sequence[float],
    k: int,
) -> List[Tuple[float, LabeledVector]]:
    """
    Return the ``k`` training points closest to ``query``, nearest first.

    Equal distances keep their training-set order.

    :param train: Training records.
    :param query: Feature vector to locate.
    :param k: Number of neighbours to return.
    :returns: ``(distance, record)`` pairs sorted by ascending distance.
    :raises InvalidArgumentError: See :func:`validate_k`.
    :raises DimensionMismatchError: If ``query`` does not match the training
        dimensionality.
    """

    k = validate_k(k, len(train))
    distances = np.fromiter(
        (euclidean_distance(point.features, query) for point in train),
        dtype=np.float64,
        count=len(train),
    )
    order = np.argsort(distances, kind="stable")[:k]
    return [(float(distances[idx]), train[idx]) for idx in order]


def tally_votes(labels: Iterable[str]) -> str:
    """
    Return the most frequent label.

    Ties go to the label encountered first in ``labels``; with neighbours
    ordered nearest first this is the tied label whose closest representative
    is nearest to the query.

    :param labels: Neighbour labels in ascending distance order.
    :returns: Winning label.
    """

    tally = Counter(labels)
    if not tally:
        raise InvalidArgumentError("cannot vote over an empty neighbour list")
    # most_common keeps insertion order among equal counts.
    return tally.most_common(1)[0][0]


def classify(train: Sequence[LabeledVector], query: Sequence[float], k: int) -> str:
    """
    Classify ``query`` by majority vote among its ``k`` nearest training points.

    :param train: Non-empty training records.
    :param query: Feature vector with the training dimensionality.
    :param k: Neighbour count, ``1 <= k <= len(train)``.
    :returns: Predicted label.
    :raises InvalidArgumentError: If ``k`` is out of range or ``train`` is empty.
    :raises DimensionMismatchError: If ``query`` has the wrong dimensionality.
    """

    neighbours = nearest_neighbours(train, query, k)
    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug(
            "Neighbours for %s: %s",
            tuple(query),
            [(round(dist, 6), point.label) for dist, point in neighbours],
        )
    return tally_votes(point.label for _, point in neighbours)


__all__ = ["classify", "nearest_neighbours", "tally_votes", "validate_k"]
