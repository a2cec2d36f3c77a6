"""A counting loop that gives the debugger something to step through."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

DEFAULT_START = 42
DEFAULT_ITERATIONS = 5


def run_debug_loop(
    start: int = DEFAULT_START,
    iterations: int = DEFAULT_ITERATIONS,
    stream: Optional[TextIO] = None,
) -> int:
    """Add every loop index to ``start`` and return the final counter.

    Raises:
        ValueError: when ``iterations`` is negative.
    """

    if iterations < 0:
        raise ValueError("iterations must be zero or positive")

    stream = stream or sys.stdout
    debug_var = start
    stream.write(f"Debug variable value: {debug_var}\n")

    for index in range(iterations):
        stream.write(f"Loop iteration: {index}\n")
        debug_var += index

    stream.write(f"Final debug variable value: {debug_var}\n")
    return debug_var
