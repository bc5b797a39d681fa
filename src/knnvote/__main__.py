#!/usr/bin/env python3
"""Allow ``python -m knnvote``."""

from __future__ import annotations

from knnvote.cli import main_entry


if __name__ == "__main__":  # pragma: no cover
    main_entry()
