"""Interactive name prompt."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

PROMPT = "Enter your name: "
ANONYMOUS_GREETING = "Hello, anonymous user!"


def greet(name: str) -> str:
    if not name:
        return ANONYMOUS_GREETING
    return f"Hello, {name}!"


def read_name(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    """Prompt once and return the line typed, without its line terminator.

    Surrounding spaces are kept. End of input counts as an empty name.
    """

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(PROMPT)
    stdout.flush()

    return stdin.readline().rstrip("\n")


def prompt_and_greet(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    stdout = stdout or sys.stdout
    greeting = greet(read_name(stdin, stdout))
    stdout.write(greeting + "\n")
    return greeting
