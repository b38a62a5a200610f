"""
Unit tests for visibility transforms.

Tests conversion between public and private identifiers and the
distinction between invalid input and inputs with no public form.
"""

import pytest

from namescope import (
    InvalidIdentifierError,
    NamescopeError,
    NoPublicFormError,
    GO,
    PYTHON,
    to_private,
    to_public,
)


class TestToPublic:
    """Test conversion to the public form."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("x", "X"),
            ("X", "X"),
            ("_X", "X"),
            ("_x", "X"),
            ("person", "Person"),
            ("_1x", "X"),
            ("漢字a", "A"),
            ("panic", "Panic"),
            ("_\u2160x", "X"),  # uppercase numerals are not public
        ],
    )
    def test_public_form(self, name, expected):
        assert to_public(name) == expected

    @pytest.mark.parametrize("name", ["_", "_1", "__", "漢字", "_\u2160"])
    def test_no_public_form(self, name):
        with pytest.raises(NoPublicFormError) as exc_info:
            to_public(name)

        assert exc_info.value.name == name

    @pytest.mark.parametrize("name", ["", "123", "\ufffd", "my-var", "func", "a b"])
    def test_invalid_identifier(self, name):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            to_public(name)

        assert "exported" in str(exc_info.value)

    def test_error_kinds_are_distinct(self):
        """Test that callers can tell bad input from an unsatisfiable request."""
        with pytest.raises(NoPublicFormError) as no_form:
            to_public("_")
        with pytest.raises(InvalidIdentifierError) as invalid:
            to_public("")

        assert not isinstance(no_form.value, InvalidIdentifierError)
        assert not isinstance(invalid.value, NoPublicFormError)
        assert isinstance(no_form.value, NamescopeError)
        assert isinstance(invalid.value, ValueError)

    def test_profile_keywords_are_invalid(self):
        assert to_public("func", PYTHON) == "Func"
        with pytest.raises(InvalidIdentifierError):
            to_public("class", PYTHON)


class TestToPrivate:
    """Test conversion to the private form."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("x", "x"),
            ("X", "x"),
            ("_X", "_X"),
            ("_", "_"),
            ("_1", "_1"),
            ("漢字a", "漢字a"),
            ("Person", "person"),
            ("HTTPServer", "hTTPServer"),
            ("\u0130x", "ix"),
        ],
    )
    def test_private_form(self, name, expected):
        assert to_private(name) == expected

    @pytest.mark.parametrize("name", ["", "123", "\ufffd"])
    def test_invalid_identifier(self, name):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            to_private(name)

        assert "unexported" in str(exc_info.value)

    @pytest.mark.parametrize("name", ["x", "X", "_X", "Person"])
    def test_round_trip_is_stable(self, name):
        assert to_private(to_private(name)) == to_private(name)
        assert to_public(to_public(name)) == to_public(name)

    @pytest.mark.parametrize("name", ["X", "Person", "HTTPServer", "\u0130x", "Über", "Ωmega"])
    def test_private_form_is_not_public(self, name):
        assert GO.is_public(name)
        assert not GO.is_public(to_private(name))


class TestPublicFormIsIdentifier:
    """Test that every public form is itself a legal public identifier."""

    @pytest.mark.parametrize("name", ["x", "_x", "_1x", "_\u2160x", "über", "漢字a"])
    def test_public_form_is_identifier(self, name):
        public = to_public(name)

        assert GO.is_identifier(public)
        assert GO.is_public(public)
