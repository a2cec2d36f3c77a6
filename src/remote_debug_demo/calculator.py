"""An integer accumulator that reports every change on a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _require_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"calculator operands must be integers, got {type(value).__name__}")
    return value


class Calculator:
    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._result = 0

    @property
    def result(self) -> int:
        return self._result

    def _report(self, text: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{text}, result: {self._result}\n")

    def add(self, value: int) -> None:
        self._result += _require_int(value)
        self._report(f"Added {value}")

    def subtract(self, value: int) -> None:
        self._result -= _require_int(value)
        self._report(f"Subtracted {value}")

    def multiply(self, value: int) -> None:
        self._result *= _require_int(value)
        self._report(f"Multiplied by {value}")

    def reset(self) -> None:
        self._result = 0
        self._report("Reset calculator")

    def get_result(self) -> int:
        return self._result
