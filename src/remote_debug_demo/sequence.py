"""Rendering and growing the demo's list of integers."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

INITIAL_VALUES = (1, 2, 3, 4, 5)


def format_vector(values: Iterable[int]) -> str:
    """Return ``values`` as ``Vector contents: 1, 2, 3`` (no trailing comma)."""

    return "Vector contents: " + ", ".join(str(value) for value in values)


def print_vector(values: Iterable[int], stream: Optional[TextIO] = None) -> None:
    (stream or sys.stdout).write(format_vector(values) + "\n")


def extend_sequence(values: List[int], start: int, stop: int) -> List[int]:
    """Append ``start..stop`` (inclusive) to ``values`` in place and return it."""

    for value in range(start, stop + 1):
        values.append(value)
    return values
