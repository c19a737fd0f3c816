"""Small integer routines: factoring, Fibonacci, GCD, sums and searches."""

from collections.abc import Iterable, Sequence


def factor(primes: Iterable[int], number: int) -> list[int]:
    """Factor ``number`` using ``primes``.

    Each prime is divided out as often as it goes; any remainder above 1
    is appended as if it were a prime.
    """
    if number < 1:
        raise ValueError(f"number must be positive, got {number}")
    result = []
    for prime in primes:
        if prime < 2:
            raise ValueError(f"invalid prime {prime}")
        while number % prime == 0:
            result.append(prime)
            number //= prime
    if number > 1:
        result.append(number)
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def find_two_that_sum(numbers: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices of two distinct entries adding up to ``target``.

    The first matching pair in scan order is returned; ``None`` when there
    is no such pair. ``numbers`` is left untouched.
    """
    for i, first in enumerate(numbers):
        for j, second in enumerate(numbers):
            if i != j and first + second == target:
                return i, j
    return None


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` (Euclid)."""
    while b:
        a, b = b, a % b
    return a


def num_in_list(values: Iterable[int], num: int) -> bool:
    """Return whether ``num`` occurs in ``values``."""
    return any(value == num for value in values)


def total(numbers: Iterable[int]) -> int:
    """Return the sum of ``numbers``."""
    result = 0
    for value in numbers:
        result += value
    return result