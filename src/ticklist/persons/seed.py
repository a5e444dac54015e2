"""Fixed sample collection used by the ``demo`` and ``people`` commands."""

from __future__ import annotations

from ticklist.persons.models import PERSON_LIST_ADAPTER, Admin, Person


def default_persons() -> list[Person]:
    """Build a fresh copy of the sample collection."""
    return PERSON_LIST_ADAPTER.validate_python([
        {"type": "user", "name": "Sarah Chen", "age": 28, "occupation": "Software Engineer"},
        {"type": "admin", "name": "Marcus Rodriguez", "age": 35, "role": "System Administrator"},
        {"type": "user", "name": "Emma Thompson", "age": 23, "occupation": "Data Analyst"},
        {"type": "admin", "name": "Raj Patel", "age": 40, "role": "Security Manager"},
        {"type": "user", "name": "Alex Kim", "age": 23, "occupation": "UX Designer"},
        {"type": "admin", "name": "Sophia Martinez", "age": 23, "role": "Network Administrator"},
    ])


def describe_person(person: Person) -> str:
    """One-line summary: name, age, and the variant-specific field."""
    detail = person.role if isinstance(person, Admin) else person.occupation
    return f"{person.name}, {person.age}, {detail}"
