"""Bubble sort and insertion sort, in place, with an optional key."""

from bisect import bisect_right
from collections.abc import Callable, MutableSequence
from typing import Any, Optional

from algodrills.person import Person, person_key

KeyFunc = Optional[Callable[[Any], Any]]


def _identity(item: Any) -> Any:
    return item


def bubble_sort(items: MutableSequence, key: KeyFunc = None) -> None:
    """Sort ``items`` in place with bubble sort. Stable; O(N^2).

    Stops early once a sweep makes no swaps.
    """
    key = key or _identity
    n = len(items)
    for sweep in range(n):
        swapped = False
        for i in range(n - 1 - sweep):
            if key(items[i + 1]) < key(items[i]):
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break


def insertion_sort(items: MutableSequence, key: KeyFunc = None) -> None:
    """Sort ``items`` in place with insertion sort. Stable.

    Each item is placed into a growing sorted list by binary search.
    """
    key = key or _identity
    keys: list = []
    ordered: list = []
    for item in items:
        item_key = key(item)
        position = bisect_right(keys, item_key)
        keys.insert(position, item_key)
        ordered.insert(position, item)
    items[:] = ordered


def bubble_sort_people(people: MutableSequence[Person]) -> None:
    """Bubble sort people by age, then last name, then first name."""
    bubble_sort(people, key=person_key)


def insertion_sort_people(people: MutableSequence[Person]) -> None:
    """Insertion sort people by age, then last name, then first name."""
    insertion_sort(people, key=person_key)