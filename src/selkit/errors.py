"""Error hierarchy for selkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selkit.selector.model import FragmentKind


class SelkitError(Exception):
    """Base error for all selkit errors."""


# ---------------------------------------------------------------------------
# Selector errors
# ---------------------------------------------------------------------------


class SelectorError(SelkitError):
    """Base error for invalid selector construction."""


class DuplicateFragmentError(SelectorError):
    """Element, id or pseudo-element set more than once on one selector."""

    def __init__(self, kind: FragmentKind) -> None:
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            f"inside the selector (duplicate {kind.label})"
        )


class OutOfOrderError(SelectorError):
    """A fragment was supplied after a fragment that must follow it."""

    def __init__(self, kind: FragmentKind, after: FragmentKind) -> None:
        self.kind = kind
        self.after = after
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element "
            f"({kind.label} given after {after.label})"
        )


class UnknownCombinatorError(SelectorError, ValueError):
    """Combinator token is not one of ' ', '>', '~', '+'."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown combinator: {token!r}")


# ---------------------------------------------------------------------------
# JSON errors
# ---------------------------------------------------------------------------


class ParseError(SelkitError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class SerializationError(SelkitError):
    """Raised when a value has no JSON representation."""


class TemplateError(SelkitError, TypeError):
    """Parsed JSON cannot carry the fields of a capability template."""
