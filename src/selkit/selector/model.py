"""Selector model: fragment kinds and combinators."""

from __future__ import annotations

from enum import Enum, IntEnum


class FragmentKind(IntEnum):
    """Fragment kinds in canonical CSS order.

    The integer value is the position in a compound selector, so a builder
    only needs to track the highest kind it has reached:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    NOTHING = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def singleton(self) -> bool:
        """True for kinds that may appear at most once."""
        return self in _SINGLETONS


_SINGLETONS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


class Combinator(str, Enum):
    """Tokens joining two compound selectors."""

    DESCENDANT = " "
    CHILD = ">"
    GENERAL_SIBLING = "~"
    ADJACENT_SIBLING = "+"

    @classmethod
    def parse(cls, token: str) -> Combinator | None:
        """Return the combinator for *token*, or None if unrecognised."""
        try:
            return cls(token)
        except ValueError:
            return None
