"""Pydantic models for the ``user`` / ``admin`` person variants."""

from __future__ import annotations

from typing import Annotated, Literal, TypedDict

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

PersonType = Literal["user", "admin"]


class _PersonBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    age: int = Field(ge=0)


class User(_PersonBase):
    type: Literal["user"] = "user"
    occupation: str


class Admin(_PersonBase):
    type: Literal["admin"] = "admin"
    role: str


Person = Annotated[User | Admin, Field(discriminator="type")]

PERSON_LIST_ADAPTER: TypeAdapter[list[Person]] = TypeAdapter(list[Person])

# Discriminant -> model class
PERSON_MODELS: dict[str, type[User] | type[Admin]] = {
    "user": User,
    "admin": Admin,
}


class UserCriteria(TypedDict, total=False):
    name: str
    age: int
    occupation: str


class AdminCriteria(TypedDict, total=False):
    name: str
    age: int
    role: str


def criteria_fields(person_type: str) -> frozenset[str]:
    """Field names a criteria mapping may use for ``person_type``."""
    model = PERSON_MODELS[person_type]
    return frozenset(name for name in model.model_fields if name != "type")
