"""Unit tests for the distance function and majority-vote classifier."""

from __future__ import annotations

import math

import pytest

from knnvote.core.classifier import classify, nearest_neighbours, tally_votes
from knnvote.core.data import LabeledVector
from knnvote.core.distance import euclidean_distance
from knnvote.errors import DimensionMismatchError, InvalidArgumentError


@pytest.mark.parametrize(
    ("first", "second"),
    [
        ((0.0, 0.0), (3.0, 4.0)),
        ((1.5, -2.0, 7.0), (-1.0, 0.5, 2.0)),
        ((), ()),
    ],
)
def test_distance_is_symmetric_and_non_negative(first, second) -> None:
    forward = euclidean_distance(first, second)
    assert forward == euclidean_distance(second, first)
    assert forward >= 0
    assert euclidean_distance(first, first) == 0


def test_distance_matches_pythagoras() -> None:
    assert euclidean_distance((0, 0), (3, 4)) == pytest.approx(5.0)


def test_distance_rejects_unequal_lengths() -> None:
    with pytest.raises(DimensionMismatchError) as excinfo:
        euclidean_distance((1.0, 2.0), (1.0, 2.0, 3.0))
    assert (excinfo.value.expected, excinfo.value.actual) == (2, 3)


def test_distance_propagates_nan_and_infinity() -> None:
    assert math.isnan(euclidean_distance((float("nan"), 0.0), (1.0, 0.0)))
    assert euclidean_distance((float("inf"),), (0.0,)) == float("inf")


def test_classify_two_nearest_share_label(toy_train) -> None:
    assert classify(toy_train, (1.0, 1.5), 2) == "A"


def test_classify_k1_returns_closest_label() -> None:
    train = (
        LabeledVector("far", (10.0, 10.0)),
        LabeledVector("near", (0.2, 0.1)),
        LabeledVector("mid", (3.0, 3.0)),
    )
    assert classify(train, (0.0, 0.0), 1) == "near"


@pytest.mark.parametrize("k", [0, -1, 4, 10])
def test_classify_rejects_out_of_range_k(toy_train, k: int) -> None:
    with pytest.raises(InvalidArgumentError):
        classify(toy_train, (1.0, 1.0), k)


@pytest.mark.parametrize("k", [True, 1.0, "2"])
def test_classify_rejects_non_integer_k(toy_train, k) -> None:
    with pytest.raises(InvalidArgumentError):
        classify(toy_train, (1.0, 1.0), k)


def test_classify_rejects_empty_training_set() -> None:
    with pytest.raises(InvalidArgumentError):
        classify((), (1.0,), 1)


def test_classify_rejects_query_with_wrong_dimension(toy_train) -> None:
    with pytest.raises(DimensionMismatchError):
        classify(toy_train, (1.0, 1.0, 1.0), 1)


def test_classify_detects_ragged_training_rows() -> None:
    train = (LabeledVector("A", (1.0, 1.0)), LabeledVector("B", (1.0,)))
    with pytest.raises(DimensionMismatchError):
        classify(train, (1.0, 1.0), 1)


def test_nearest_neighbours_keep_training_order_on_distance_ties() -> None:
    train = (
        LabeledVector("first", (1.0,)),
        LabeledVector("second", (-1.0,)),
        LabeledVector("third", (1.0,)),
    )
    neighbours = nearest_neighbours(train, (0.0,), 3)
    assert [point.label for _, point in neighbours] == ["first", "second", "third"]
    assert [dist for dist, _ in neighbours] == [1.0, 1.0, 1.0]


def test_vote_tie_goes_to_label_of_nearest_neighbour() -> None:
    train = (
        LabeledVector("B", (2.0,)),
        LabeledVector("A", (1.0,)),
        LabeledVector("B", (4.0,)),
        LabeledVector("A", (3.0,)),
    )
    # Neighbours by distance from 0: A(1), B(2), A(3), B(4) -> 2-2 tie.
    assert classify(train, (0.0,), 4) == "A"
    assert classify(train, (0.0,), 4) == classify(train, (0.0,), 4)


def test_vote_tie_on_equal_distances_uses_training_order() -> None:
    train = (LabeledVector("Y", (1.0,)), LabeledVector("X", (-1.0,)))
    assert classify(train, (0.0,), 2) == "Y"


def test_tally_votes_prefers_majority() -> None:
    assert tally_votes(["A", "B", "B"]) == "B"
    assert tally_votes(["C", "D"]) == "C"


def test_tally_votes_rejects_empty_input() -> None:
    with pytest.raises(InvalidArgumentError):
        tally_votes([])
