"""String drills: reversal and FizzBuzz."""


def reverse(word: str) -> str:
    """Return ``word`` with its characters in reverse order."""
    return word[::-1]


def _fizz_buzz_term(i: int) -> str:
    if i % 15 == 0:
        return "Fizz Buzz"
    if i % 3 == 0:
        return "Fizz"
    if i % 5 == 0:
        return "Buzz"
    return str(i)


def fizz_buzz(n: int) -> str:
    """Return the FizzBuzz terms from 1 to ``n`` joined by ", "."""
    return ", ".join(_fizz_buzz_term(i) for i in range(1, n + 1))


def print_fizz_buzz(n: int) -> None:
    """Print the FizzBuzz line for ``n`` to standard output."""
    print(fizz_buzz(n))