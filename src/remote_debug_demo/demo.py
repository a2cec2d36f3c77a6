"""Remote debug demo program.

Runs a short, fully sequential script meant to be stepped through with a
debugger: calculator arithmetic, a growing list, a recursive factorial, one
interactive prompt and a counting loop.

Usage
-----
    python -m remote_debug_demo             # prompts for a name
    python -m remote_debug_demo --name Ada  # skips the prompt

Set ``DEBUG_DEMO_COLOR=0`` to disable the coloured banner on a terminal.
"""

from __future__ import annotations

import argparse
import io
import sys
from typing import Optional, Sequence, TextIO

from remote_debug_demo.calculator import Calculator
from remote_debug_demo.console import Color, env_enabled, paint
from remote_debug_demo.debug_loop import run_debug_loop
from remote_debug_demo.factorial import factorial
from remote_debug_demo.greeting import greet, prompt_and_greet
from remote_debug_demo.sequence import INITIAL_VALUES, extend_sequence, print_vector

BANNER = "=== Remote Debug Demo Program ==="
COMPLETED = "Program completed successfully!"
FACTORIAL_INPUT = 5


def run_demo(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    name: Optional[str] = None,
    color: bool = False,
) -> int:
    stdout = stdout or sys.stdout

    stdout.write(paint(BANNER, Color.CYAN, color) + "\n")

    calc = Calculator(stdout)
    calc.add(10)
    calc.subtract(3)
    calc.multiply(2)
    stdout.write(f"Final calculator result: {calc.get_result()}\n")

    numbers = list(INITIAL_VALUES)
    print_vector(numbers, stdout)
    extend_sequence(numbers, 6, 10)
    print_vector(numbers, stdout)

    fact = factorial(FACTORIAL_INPUT)
    stdout.write(f"Factorial of {FACTORIAL_INPUT} is: {fact}\n")

    if name is None:
        prompt_and_greet(stdin, stdout)
    else:
        stdout.write(greet(name) + "\n")

    run_debug_loop(stream=stdout)

    stdout.write(paint(COMPLETED, Color.GREEN, color) + "\n")
    stdout.flush()
    return 0


def parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Remote debug demo program")
    parser.add_argument("--name", help="Greet NAME instead of prompting for it")
    return parser.parse_args(argv)


def _tolerate_undecodable_console() -> None:
    # Raw console bytes never abort the demo; undecodable ones become U+FFFD.
    for stream in (sys.stdin, sys.stdout):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(errors="replace")


def main(argv: Optional[Sequence[str]] = None) -> int:
    namespace = parse_args(argv)
    _tolerate_undecodable_console()
    color = env_enabled("DEBUG_DEMO_COLOR", default=True) and sys.stdout.isatty()
    return run_demo(name=namespace.name, color=color)


if __name__ == "__main__":
    raise SystemExit(main())
