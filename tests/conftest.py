"""Shared pytest fixtures and test-wide configuration."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Sequence

import pytest

# Ensure project modules are importable without an editable install.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from knnvote.core.data import LabeledVector  # noqa: E402


@pytest.fixture
def write_lines(tmp_path: Path) -> Callable[[str, Sequence[str]], Path]:
    """Return a helper that writes raw lines to a file under ``tmp_path``."""

    def _write(name: str, lines: Sequence[str]) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def toy_train() -> tuple[LabeledVector, ...]:
    """Three-point training set with two well separated classes."""

    return (
        LabeledVector("A", (1.0, 1.0)),
        LabeledVector("B", (5.0, 5.0)),
        LabeledVector("A", (1.0, 2.0)),
    )
