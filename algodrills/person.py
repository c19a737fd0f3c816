"""The person record used by the sorting drills."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """A person with an age and a name."""

    age: int
    first_name: str
    last_name: str


def person_key(person: Person) -> tuple[int, str, str]:
    """Sort key ordering people by age, then last name, then first name."""
    return (person.age, person.last_name, person.first_name)