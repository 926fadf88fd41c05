"""Tests for the selkit error hierarchy."""

import pytest

from selkit.errors import (
    DuplicateFragmentError,
    OutOfOrderError,
    ParseError,
    SelectorError,
    SelkitError,
    SerializationError,
    TemplateError,
    UnknownCombinatorError,
)
from selkit.selector.model import FragmentKind


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [DuplicateFragmentError, OutOfOrderError, UnknownCombinatorError],
    )
    def test_selector_errors(self, cls):
        assert issubclass(cls, SelectorError)
        assert issubclass(cls, SelkitError)

    def test_json_errors(self):
        assert issubclass(ParseError, SelkitError)
        assert issubclass(SerializationError, SelkitError)
        assert issubclass(TemplateError, SelkitError)
        assert issubclass(TemplateError, TypeError)


class TestAttributes:
    def test_duplicate_fragment(self):
        err = DuplicateFragmentError(FragmentKind.PSEUDO_ELEMENT)
        assert err.kind is FragmentKind.PSEUDO_ELEMENT
        assert "more than one time" in str(err)
        assert "pseudo-element" in str(err)

    def test_out_of_order(self):
        err = OutOfOrderError(FragmentKind.ID, FragmentKind.CLASS)
        assert err.kind is FragmentKind.ID
        assert err.after is FragmentKind.CLASS
        assert "(id given after class)" in str(err)

    def test_parse_error_position(self):
        err = ParseError("bad", line=3, column=7)
        assert (err.line, err.column) == (3, 7)
        assert str(err) == "bad"

    def test_parse_error_defaults(self):
        err = ParseError("bad")
        assert err.line is None
        assert err.column is None
