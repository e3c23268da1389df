"""Person display-name resolution.

Two presentation policies are derived from the same name components:

- full name: "Name 'Nickname' MiddleName Surname SecondSurname"
- graph label: nickname (or given name) plus surname, for node labels

Examples:
    "John Smith"                              (no nickname, no middle names)
    "Charles 'Charlie' Brown"                 (with nickname)
    "Matias Alejandro Godoy Biedma"           (middle name and second surname)
    "Matias 'Matto' Alejandro Godoy Biedma"   -> graph label "Matto Godoy"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Accepted record keys per component, canonical name first
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "given_name": ("given_name", "givenName", "name", "first_name"),
    "surname": ("surname", "last_name"),
    "middle_name": ("middle_name", "middleName"),
    "second_surname": ("second_surname", "secondSurname", "secondLastName"),
    "nickname": ("nickname",),
}


class PersonName(BaseModel):
    """Name components of a person. Only ``given_name`` is required."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    given_name: str = Field(validation_alias=AliasChoices(*FIELD_ALIASES["given_name"]))
    surname: str | None = Field(default=None, validation_alias=AliasChoices(*FIELD_ALIASES["surname"]))
    middle_name: str | None = Field(default=None, validation_alias=AliasChoices(*FIELD_ALIASES["middle_name"]))
    second_surname: str | None = Field(
        default=None, validation_alias=AliasChoices(*FIELD_ALIASES["second_surname"])
    )
    nickname: str | None = Field(default=None, validation_alias=AliasChoices(*FIELD_ALIASES["nickname"]))

    @classmethod
    def from_record(cls, record: Any) -> PersonName:
        """Build from a PersonName, a mapping, or any object exposing name attributes."""
        if isinstance(record, cls):
            return record
        if isinstance(record, Mapping):
            return cls.model_validate(dict(record))

        values: dict[str, Any] = {}
        for field_name, aliases in FIELD_ALIASES.items():
            for alias in aliases:
                value = getattr(record, alias, None)
                if value is not None:
                    values[field_name] = value
                    break
        return cls.model_validate(values)


def is_present(value: str | None) -> TypeGuard[str]:
    """A name component is present when it is a non-empty string.

    Whitespace-only strings count as present.
    """
    return isinstance(value, str) and len(value) > 0


def format_full_name(person: Any) -> str:
    """Format every present name component in canonical order."""
    name = PersonName.from_record(person)
    parts: list[str] = [name.given_name]

    if is_present(name.nickname):
        parts.append(f"'{name.nickname}'")
    if is_present(name.middle_name):
        parts.append(name.middle_name)
    if is_present(name.surname):
        parts.append(name.surname)
    if is_present(name.second_surname):
        parts.append(name.second_surname)

    return " ".join(parts)


def format_person_name(
    given_name: str,
    surname: str | None = None,
    middle_name: str | None = None,
    second_surname: str | None = None,
    nickname: str | None = None,
) -> str:
    """Positional form of :func:`format_full_name`."""
    return format_full_name(
        PersonName(
            given_name=given_name,
            surname=surname,
            middle_name=middle_name,
            second_surname=second_surname,
            nickname=nickname,
        )
    )


def format_graph_label(person: Any) -> str:
    """Format a condensed label: nickname (or given name) plus surname.

    Middle name and second surname are always dropped to keep node labels short.
    """
    name = PersonName.from_record(person)
    display_name = name.nickname if is_present(name.nickname) else name.given_name
    if is_present(name.surname):
        return f"{display_name} {name.surname}"
    return display_name
