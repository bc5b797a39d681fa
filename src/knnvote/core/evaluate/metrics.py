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

"""Accuracy metrics for held-out evaluation of the classifier."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ...errors import InvalidArgumentError
from ..classifier import classify
from ..data import LabeledVector

LOGGER = logging.getLogger("knnvote.evaluate")


@dataclass(frozen=True)
class EvaluationSummary:
    """
    Outcome of classifying every test example.

    :ivar k: Neighbour count used for every prediction.
    :vartype k: int
    :ivar correct: Number of predictions equal to the true label.
    :vartype correct: int
    :ivar total: Number of test examples evaluated.
    :vartype total: int
    """

    k: int
    correct: int
    total: int

    @property
    def accuracy(self) -> float:
        """Percentage of correct predictions in ``[0, 100]``."""

        return (self.correct / self.total) * 100


def evaluate(
    train: Sequence[LabeledVector],
    test: Sequence[LabeledVector],
    k: int,
) -> EvaluationSummary:
    """
    Classify each test example against ``train`` and count exact label matches.

    :param train: Training records.
    :param test: Held-out records with known labels.
    :param k: Neighbour count forwarded to :func:`~knnvote.core.classifier.classify`.
    :returns: Summary of correct predictions.
    :raises InvalidArgumentError: If ``test`` is empty or ``k`` is invalid.
    """

    if not test:
        raise InvalidArgumentError("test set is empty; accuracy is undefined")
    correct = 0
    for example in test:
        if classify(train, example.features, k) == example.label:
            correct += 1
    summary = EvaluationSummary(k=k, correct=correct, total=len(test))
    LOGGER.info(
        "k=%d: %d/%d correct (%.2f%%)",
        summary.k,
        summary.correct,
        summary.total,
        summary.accuracy,
    )
    return summary


def accuracy(
    train: Sequence[LabeledVector],
    test: Sequence[LabeledVector],
    k: int,
) -> float:
    """Return the percentage of ``test`` examples classified correctly."""

    return evaluate(train, test, k).accuracy


__all__ = ["EvaluationSummary", "accuracy", "evaluate"]
