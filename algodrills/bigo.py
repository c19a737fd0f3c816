"""Small functions whose running times show different Big O classes."""

from collections.abc import Iterable, Sequence


def add(a: int, b: int) -> int:
    """Return ``a + b``. O(1)."""
    return a + b


def sum_to_max(maximum: int) -> int:
    """Return 1 + 2 + ... + ``maximum`` by looping. O(N) in ``maximum``."""
    result = 0
    for i in range(1, maximum + 1):
        result += i
    return result


def sum_to_max_v2(maximum: int) -> int:
    """Return 1 + 2 + ... + ``maximum`` by formula. O(1)."""
    return maximum * (maximum + 1) // 2


def sum_vals(vals: Iterable[int]) -> int:
    """Return the sum of ``vals``. O(N) in the number of values."""
    result = 0
    for value in vals:
        result += value
    return result


def find(values: Sequence[int], x: int) -> int:
    """Return the index of the first ``x`` in ``values``, or -1. O(N)."""
    for index, value in enumerate(values):
        if value == x:
            return index
    return -1


def grid(x: int, y: int) -> str:
    """Return ``y`` rows of ``x`` alternating 'x' and 'o' characters. O(XY).

    The alternation carries on across row ends.
    """
    rows = []
    start = 0
    for _ in range(y):
        rows.append("".join("xo"[(start + j) % 2] for j in range(x)) + "\n")
        start = (start + x) % 2
    return "".join(rows)


def print_list(word: str, n: int) -> None:
    """Print the code points of ``word`` run together, ``n`` times. O(N*M)."""
    line = "".join(str(ord(char)) for char in word)
    for _ in range(n):
        print(line)


def cube(n: int) -> str:
    """Return every "(x, y, z)" triple with coordinates below ``n``. O(N^3)."""
    return "".join(
        f"({x}, {y}, {z})\n"
        for x in range(n)
        for y in range(n)
        for z in range(n)
    )