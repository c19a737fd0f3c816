"""Command that reads pairs of integers and prints their GCDs.

Input is a count followed by that many pairs of integers, separated by
any whitespace.
"""

import argparse
import sys
from collections.abc import Iterable

from algodrills.numbers import gcd


def _next_int(tokens, what: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"missing {what}") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None


def run(lines: Iterable[str]) -> list[int]:
    """Parse a count and that many integer pairs; return their GCDs."""
    tokens = (token for line in lines for token in line.split())
    count = _next_int(tokens, "count")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    results = []
    for index in range(1, count + 1):
        a = _next_int(tokens, f"first number of pair {index}")
        b = _next_int(tokens, f"second number of pair {index}")
        results.append(gcd(a, b))
    return results


def main(argv=None) -> int:
    """Read the pairs from standard input and print one GCD per line."""
    parser = argparse.ArgumentParser(
        description="Print the greatest common divisor of each pair read from stdin."
    )
    parser.parse_args(argv)
    try:
        results = run(sys.stdin)
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    for value in results:
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())