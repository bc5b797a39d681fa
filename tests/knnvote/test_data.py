"""Unit tests for ``knnvote.core.data`` parsing and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from knnvote.core.data import (
    LabeledVector,
    format_record,
    load_dataset,
    parse_record,
    parse_vector,
    write_dataset,
)
from knnvote.errors import DatasetIOError, FormatError


def test_parse_record_splits_features_and_label() -> None:
    record = parse_record("1.5,-2,3e2,setosa")
    assert record == LabeledVector("setosa", (1.5, -2.0, 300.0))
    assert record.dimension == 3


def test_parse_record_keeps_label_verbatim() -> None:
    """Labels keep surrounding whitespace and case exactly as written."""

    record = parse_record("1,2, Iris-Setosa ")
    assert record.label == " Iris-Setosa "


@pytest.mark.parametrize("token", ["1_0", "0x1A", "1e", ".", "+", "1.2.3", "١"])
def test_parse_record_rejects_non_decimal_notation(token: str) -> None:
    with pytest.raises(FormatError) as excinfo:
        parse_record(f"{token},2,A")
    assert excinfo.value.token == token


@pytest.mark.parametrize(
    ("token", "expected"),
    [("-1.5e3", -1500.0), ("+.5", 0.5), ("7.", 7.0), (" 2E-1 ", 0.2), ("Infinity", float("inf"))],
)
def test_parse_record_accepts_decimal_notation(token: str, expected: float) -> None:
    assert parse_record(f"{token},A").features == (expected,)


def test_parse_record_single_token_has_no_features() -> None:
    record = parse_record("lonely")
    assert record.features == ()
    assert record.label == "lonely"


def test_parse_record_rejects_non_numeric_feature() -> None:
    with pytest.raises(FormatError) as excinfo:
        parse_record("1,x,A")
    assert excinfo.value.token == "x"
    assert excinfo.value.line_number is None


def test_labeled_vector_is_immutable() -> None:
    record = LabeledVector("A", (1.0,))
    with pytest.raises(AttributeError):
        record.label = "B"  # type: ignore[misc]


def test_parse_vector_accepts_whitespace_around_numbers() -> None:
    assert parse_vector(" 1.0, 2 ,-3.5") == (1.0, 2.0, -3.5)


@pytest.mark.parametrize("text", ["", "1,,2", "1,two"])
def test_parse_vector_rejects_invalid_tokens(text: str) -> None:
    with pytest.raises(FormatError):
        parse_vector(text)


def test_load_dataset_preserves_order_and_skips_empty_lines(write_lines) -> None:
    path = write_lines("train.csv", ["1,1,A", "", "5,5,B", "1,2,A", ""])
    dataset = load_dataset(path)
    assert [record.label for record in dataset] == ["A", "B", "A"]
    assert dataset[1].features == (5.0, 5.0)


def test_load_dataset_handles_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "crlf.csv"
    path.write_bytes(b"1,2,A\r\n3,4,B\r\n")
    dataset = load_dataset(path)
    assert [record.label for record in dataset] == ["A", "B"]


def test_load_dataset_ignores_utf8_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "export.csv"
    path.write_bytes(b"\xef\xbb\xbf1,2,A\n3,4,B\n")
    dataset = load_dataset(path)
    assert dataset[0] == LabeledVector("A", (1.0, 2.0))
    assert len(dataset) == 2


def test_load_dataset_reports_line_number_on_format_error(write_lines) -> None:
    path = write_lines("bad.csv", ["1,1,A", "1,x,A"])
    with pytest.raises(FormatError) as excinfo:
        load_dataset(path)
    error = excinfo.value
    assert error.token == "x"
    assert error.line_number == 2
    assert error.path == path
    assert f"{path}:2" in str(error)


def test_load_dataset_missing_file_raises_io_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.csv"
    with pytest.raises(DatasetIOError) as excinfo:
        load_dataset(missing)
    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_load_dataset_directory_raises_io_error(tmp_path: Path) -> None:
    with pytest.raises(DatasetIOError):
        load_dataset(tmp_path)


def test_empty_file_loads_as_empty_dataset(write_lines) -> None:
    assert load_dataset(write_lines("empty.csv", [])) == ()


def test_write_then_load_returns_identical_records(tmp_path: Path) -> None:
    dataset = (
        LabeledVector("A", (0.1, 1e-12, -3.0)),
        LabeledVector("b c", (1.0 / 3.0, 2.5e10, 0.0)),
        LabeledVector(" padded ", (7.0, 8.0, 9.0)),
    )
    path = write_dataset(tmp_path / "nested" / "data.csv", dataset)
    assert load_dataset(path) == dataset


def test_format_record_puts_label_last() -> None:
    assert format_record(LabeledVector("A", (1.0, 2.5))) == "1.0,2.5,A"
