"""Recursive factorial helper along with a small CLI entrypoint.

Usage
-----
    python -m remote_debug_demo.factorial 5  # prints 120

Every call recurses once per step, so inputs beyond the interpreter's recursion
limit raise ``RecursionError``.
"""

from __future__ import annotations

import argparse
import sys


def factorial(n: int) -> int:
    """Return n! for an integer ``n``; any ``n <= 1`` yields 1.

    Raises:
        TypeError:      when ``n`` is not an integer.
        RecursionError: when ``n`` exceeds the interpreter's recursion limit.
    """

    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("factorial() requires an integer input")
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute n! recursively for an integer n.")
    parser.add_argument("n", type=int, help="Target integer")
    args = parser.parse_args(argv)

    try:
        result = factorial(args.n)
    except (TypeError, RecursionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
