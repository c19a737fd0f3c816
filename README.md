# algodrills

A collection of small algorithm drills: converting numbers between
bases, classic number puzzles, a few text exercises, functions that show
Big O growth, and hand-written bubble and insertion sorts. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.bases`

Convert numbers between bases 2 to 16, using the digits `0-9` and `A-F`
(lower-case letters are accepted on input; output is upper case).

```python
from algodrills.bases import base_to_dec, dec_to_base, base_to_base

base_to_dec("E", 16)         # 14
base_to_dec("1110", 2)       # 14
dec_to_base(14, 16)          # "E"
dec_to_base(14, 2)           # "1110"
base_to_base("E", 16, 2)     # "1110"
```

A base outside 2 to 16, a digit that is not valid in the given base, or a
negative number passed to `dec_to_base` raises `ValueError`. Zero is
written by `dec_to_base` as the empty string.

### `algodrills.numbers`

```python
from algodrills.numbers import (
    factor, fibonacci, find_two_that_sum, gcd, num_in_list, total,
)

factor([2, 3, 5], 28)                 # [2, 2, 7] - a leftover above 1 is kept
fibonacci(14)                         # 377
find_two_that_sum([1, 2, 3, 4], 7)    # (2, 3)
find_two_that_sum([0, 1, 1], 0)       # None
gcd(30, 9)                            # 3
num_in_list([1, 2, 3], 2)             # True
total([1, 2, 3, 4, 5])                # 15
```

- `factor` divides out each given prime as often as it goes and appends
  any remainder above 1. It raises `ValueError` for a number below 1 or a
  "prime" below 2.
- `find_two_that_sum` returns the first pair of distinct indices in scan
  order whose values add up to the target, or `None`; the input is not
  changed.

### `algodrills.text`

```python
from algodrills.text import reverse, fizz_buzz, print_fizz_buzz

reverse("alphabet")     # "tebahpla"
reverse("日本語")        # "語本日"
fizz_buzz(5)            # "1, 2, Fizz, 4, Buzz"
print_fizz_buzz(15)     # prints the line, ending in "Fizz Buzz"
```

### `algodrills.bigo`

Functions written to illustrate different growth rates:

| Function | Does | Growth |
| --- | --- | --- |
| `add(a, b)` | returns `a + b` | O(1) |
| `sum_to_max(maximum)` | sums 1..maximum in a loop | O(N) |
| `sum_to_max_v2(maximum)` | sums 1..maximum by formula | O(1) |
| `sum_vals(vals)` | sums the values | O(N) |
| `find(values, x)` | index of the first `x`, or -1 | O(N) |
| `grid(x, y)` | `y` rows of `x` alternating `x`/`o` characters | O(XY) |
| `print_list(word, n)` | prints the code points of `word` run together, `n` times | O(N·M) |
| `cube(n)` | every `(x, y, z)` triple below `n`, one per line | O(N³) |

```python
from algodrills.bigo import grid, sum_to_max_v2

sum_to_max_v2(100)   # 5050
print(grid(3, 3), end="")
# xox
# oxo
# xox
```

The alternation in `grid` carries on across row ends, so `grid(2, 2)` is
`"xo\nxo\n"`.

### `algodrills.person` and `algodrills.sorting`

`Person` is a frozen dataclass with `age`, `first_name` and `last_name`.
`person_key` gives the ordering used by the people sorts: age, then last
name, then first name.

```python
from algodrills.person import Person
from algodrills.sorting import (
    bubble_sort, insertion_sort, bubble_sort_people, insertion_sort_people,
)

values = [5, 3, 4, 1]
bubble_sort(values)
values                    # [1, 3, 4, 5]

words = ["dog", "cat", "ball"]
insertion_sort(words)
words                     # ["ball", "cat", "dog"]

people = [Person(33, "Bob", "Smilesalot"), Person(12, "Alex", "Zero")]
bubble_sort_people(people)
people[0].first_name      # "Alex"
```

Both sorts work in place on the sequence they are given, are stable, and
accept an optional `key` function. `bubble_sort` stops early once a sweep
makes no swaps; `insertion_sort` places each item by binary search.

## Command line

`algodrills-gcd` reads a count from standard input, then that many pairs
of integers (separated by any whitespace), and prints the greatest common
divisor of every pair, one per line:

```
$ printf '2\n30 9\n100 9\n' | algodrills-gcd
3
1
```

A missing or non-integer value, or a negative count, prints an error to
standard error and exits with status 1. The same parsing is available as
`algodrills.gcd_cli.run(lines)`, which returns the list of results.