"""Filter a mixed person collection by variant and field criteria."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Literal, overload

from ticklist.errors import ValidationError
from ticklist.persons.models import (
    PERSON_MODELS,
    Admin,
    AdminCriteria,
    Person,
    User,
    UserCriteria,
    criteria_fields,
)


def _strict_equals(actual: Any, expected: Any) -> bool:
    # bool is an int subclass; True must not match 1
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected
    return actual == expected


def matches_criteria(person: Person, criteria: Mapping[str, Any]) -> bool:
    """True when every field in ``criteria`` equals the person's value."""
    return all(
        _strict_equals(getattr(person, field), expected)
        for field, expected in criteria.items()
    )


@overload
def filter_persons(
    persons: Iterable[Person],
    person_type: Literal["user"],
    criteria: UserCriteria | None = None,
) -> list[User]: ...


@overload
def filter_persons(
    persons: Iterable[Person],
    person_type: Literal["admin"],
    criteria: AdminCriteria | None = None,
) -> list[Admin]: ...


def filter_persons(
    persons: Iterable[Person],
    person_type: str,
    criteria: Mapping[str, Any] | None = None,
) -> list[User] | list[Admin]:
    """Return the persons of ``person_type`` matching every criteria field.

    Input order is preserved and ``persons`` is only read. An empty result
    is returned when nothing matches.

    Raises:
        ValidationError: ``person_type`` is not a known variant, or
            ``criteria`` names a field the variant does not have. Both are
            checked before ``persons`` is read, so they raise even for an
            empty input; only a well-formed query that matches nothing
            returns ``[]``.
    """
    if person_type not in PERSON_MODELS:
        raise ValidationError(f"Unknown person type: {person_type!r}")

    criteria = dict(criteria or {})
    unknown = set(criteria) - criteria_fields(person_type)
    if unknown:
        raise ValidationError(
            f"Invalid criteria for {person_type}: {', '.join(sorted(unknown))}"
        )

    return [
        p for p in persons
        if p.type == person_type and matches_criteria(p, criteria)
    ]
