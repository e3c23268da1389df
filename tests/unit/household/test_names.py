"""Tests for person display-name resolution.

Covers both presentation policies (full name and graph label), both calling
conventions (positional and structured record), and the presence rule.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from household.names import (
    PersonName,
    format_full_name,
    format_graph_label,
    format_person_name,
    is_present,
)


class TestIsPresent:
    """Presence rule shared by both policies."""

    def test_none_is_absent(self):
        assert is_present(None) is False

    def test_empty_string_is_absent(self):
        assert is_present("") is False

    def test_non_empty_string_is_present(self):
        assert is_present("Smith") is True

    def test_whitespace_only_is_present(self):
        """Whitespace is not stripped before the check."""
        assert is_present("   ") is True


class TestFormatPersonName:
    """Positional calling convention."""

    def test_name_only(self):
        assert format_person_name("John") == "John"

    def test_name_and_surname(self):
        assert format_person_name("John", "Smith") == "John Smith"

    def test_name_with_nickname(self):
        assert format_person_name("Charles", None, None, None, "Charlie") == "Charles 'Charlie'"

    def test_name_nickname_and_surname(self):
        assert format_person_name("Charles", "Brown", None, None, "Charlie") == "Charles 'Charlie' Brown"

    def test_none_and_omitted_are_identical(self):
        assert format_person_name("John", None) == format_person_name("John") == "John"
        assert format_person_name("John", "Smith", None, None, None) == "John Smith"

    def test_empty_strings_are_absent(self):
        assert format_person_name("John", "", "", "", "") == "John"

    def test_special_characters(self):
        assert format_person_name("Mary-Jane", "O'Connor", None, None, "MJ") == "Mary-Jane 'MJ' O'Connor"

    def test_unicode_passes_through(self):
        assert format_person_name("José", "García", None, None, "Pepe") == "José 'Pepe' García"

    def test_middle_name(self):
        assert format_person_name("John", "Doe", "Michael") == "John Michael Doe"

    def test_second_surname(self):
        assert format_person_name("Jane", "Smith", None, "Johnson") == "Jane Smith Johnson"

    def test_middle_name_and_second_surname(self):
        assert format_person_name("Matias", "Godoy", "Alejandro", "Biedma") == "Matias Alejandro Godoy Biedma"

    def test_all_components(self):
        assert (
            format_person_name("Matias", "Godoy", "Alejandro", "Biedma", "Matto")
            == "Matias 'Matto' Alejandro Godoy Biedma"
        )

    def test_keyword_arguments(self):
        assert format_person_name("Matias", nickname="Matto", second_surname="Biedma") == "Matias 'Matto' Biedma"

    def test_whitespace_nickname_is_kept(self):
        assert format_person_name("John", nickname="   ") == "John '   '"


class TestFormatFullName:
    """Structured-record calling convention."""

    def test_model_with_all_fields(self):
        person = PersonName(
            given_name="Matias",
            surname="Godoy",
            middle_name="Alejandro",
            second_surname="Biedma",
            nickname="Matto",
        )
        assert format_full_name(person) == "Matias 'Matto' Alejandro Godoy Biedma"

    def test_dict_with_only_name(self):
        assert format_full_name({"given_name": "John"}) == "John"

    def test_dict_with_null_values(self):
        assert format_full_name({"given_name": "John", "surname": None, "nickname": None}) == "John"

    def test_camel_case_record(self):
        person = {
            "name": "Matias",
            "surname": "Godoy",
            "middleName": "Alejandro",
            "secondLastName": "Biedma",
            "nickname": "Matto",
        }
        assert format_full_name(person) == "Matias 'Matto' Alejandro Godoy Biedma"

    def test_given_name_alias(self):
        assert format_full_name({"givenName": "Jane", "secondSurname": "Johnson", "surname": "Smith"}) == (
            "Jane Smith Johnson"
        )

    def test_attribute_record(self):
        """Objects such as ORM rows are read through their attributes."""
        person = SimpleNamespace(first_name="John", last_name="Doe", nickname="Johnny")
        assert format_full_name(person) == "John 'Johnny' Doe"

    def test_extra_fields_are_ignored(self):
        assert format_full_name({"id": 7, "given_name": "John", "email": "j@example.com"}) == "John"

    def test_is_deterministic(self):
        person = {"given_name": "Charles", "surname": "Brown", "nickname": "Charlie"}
        assert format_full_name(person) == format_full_name(person)

    def test_missing_given_name_is_caller_error(self):
        with pytest.raises(ValueError):
            format_full_name({"surname": "Smith"})


class TestFormatGraphLabel:
    """Condensed label for graph nodes."""

    def test_name_only(self):
        assert format_graph_label({"name": "John"}) == "John"

    def test_name_and_surname(self):
        assert format_graph_label({"name": "John", "surname": "Doe"}) == "John Doe"

    def test_nickname_replaces_name(self):
        assert format_graph_label({"name": "Matias", "surname": "Godoy", "nickname": "Matto"}) == "Matto Godoy"

    def test_middle_names_ignored(self):
        person = {"name": "Matias", "surname": "Godoy", "middleName": "Alejandro", "secondLastName": "Biedma"}
        assert format_graph_label(person) == "Matias Godoy"

    def test_nickname_with_surname_ignores_middle_names(self):
        person = {
            "name": "Matias",
            "surname": "Godoy",
            "middleName": "Alejandro",
            "secondLastName": "Biedma",
            "nickname": "Matto",
        }
        assert format_graph_label(person) == "Matto Godoy"

    def test_null_surname(self):
        assert format_graph_label({"name": "John", "surname": None}) == "John"

    def test_nickname_without_surname(self):
        assert format_graph_label({"name": "John", "surname": None, "nickname": "Johnny"}) == "Johnny"

    def test_empty_nickname_falls_back_to_name(self):
        assert format_graph_label({"name": "Charles", "nickname": ""}) == "Charles"

    def test_special_characters(self):
        assert format_graph_label({"name": "Mary-Jane", "surname": "O'Connor", "nickname": "MJ"}) == "MJ O'Connor"


OPTIONAL_FIELDS = ("nickname", "middle_name", "surname", "second_surname")


@pytest.mark.parametrize(
    "person",
    [
        {"given_name": "John"},
        {"given_name": "John", "surname": "Smith"},
        {"given_name": "Charles", "nickname": "Charlie"},
        {"given_name": "Matias", "surname": "Godoy", "middle_name": "Alejandro", "second_surname": "Biedma"},
        {
            "given_name": "Matias",
            "surname": "Godoy",
            "middle_name": "Alejandro",
            "second_surname": "Biedma",
            "nickname": "Matto",
        },
    ],
)
def test_token_properties(person):
    """Full name starts with the given name and has one token per present field."""
    full_name = format_full_name(person)
    label = format_graph_label(person)

    present = sum(1 for field in OPTIONAL_FIELDS if person.get(field))
    assert full_name.startswith(person["given_name"])
    assert len(full_name.split(" ")) == 1 + present

    label_tokens = label.split(" ")
    assert len(label_tokens) <= 2
    assert label_tokens[0] == (person.get("nickname") or person["given_name"])
