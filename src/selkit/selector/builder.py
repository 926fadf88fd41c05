"""Fluent CSS selector builder with ordering and cardinality checks."""

from __future__ import annotations

import logging

from selkit.config import SelkitConfig
from selkit.errors import (
    DuplicateFragmentError,
    OutOfOrderError,
    UnknownCombinatorError,
)
from selkit.selector.model import Combinator, FragmentKind

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments and renders them as a CSS selector.

    Fragments must be supplied in canonical order (element, id, classes,
    attributes, pseudo-classes, pseudo-element).  Every setter validates
    before mutating, so a rejected call leaves the builder unchanged, and
    returns the builder itself for chaining.
    """

    def __init__(self, config: SelkitConfig | None = None) -> None:
        self._config = config or SelkitConfig()
        self._reached = FragmentKind.NOTHING
        self._element: str | None = None
        self._combined: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None

    # --- read access ----------------------------------------------------------

    @property
    def element_name(self) -> str | None:
        return self._element

    @property
    def combined(self) -> str | None:
        """Prerendered ``left <token> right`` text, if built by combine()."""
        return self._combined

    @property
    def id_name(self) -> str | None:
        return self._id

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    @property
    def attributes(self) -> tuple[str, ...]:
        return tuple(self._attributes)

    @property
    def pseudo_classes(self) -> tuple[str, ...]:
        return tuple(self._pseudo_classes)

    @property
    def pseudo_element_name(self) -> str | None:
        return self._pseudo_element

    # --- validation -----------------------------------------------------------

    def _is_set(self, kind: FragmentKind) -> bool:
        if kind is FragmentKind.ELEMENT:
            return self._element is not None or self._combined is not None
        if kind is FragmentKind.ID:
            return self._id is not None
        if kind is FragmentKind.PSEUDO_ELEMENT:
            return self._pseudo_element is not None
        return False

    def _admit(self, kind: FragmentKind) -> None:
        """Raise unless a fragment of *kind* may be added now."""
        if kind.singleton and self._is_set(kind):
            logger.debug("Rejected duplicate %s in %r", kind.label, self)
            raise DuplicateFragmentError(kind)
        if self._reached > kind:
            logger.debug(
                "Rejected %s after %s in %r",
                kind.label,
                self._reached.label,
                self,
            )
            raise OutOfOrderError(kind, self._reached)

    def _advance(self, kind: FragmentKind) -> None:
        if kind > self._reached:
            self._reached = kind

    # --- fragment setters -----------------------------------------------------

    def set_element(self, name: str) -> SelectorBuilder:
        """Set the type selector, e.g. ``div``."""
        self._admit(FragmentKind.ELEMENT)
        self._element = name
        self._advance(FragmentKind.ELEMENT)
        return self

    def set_id(self, name: str) -> SelectorBuilder:
        """Set the ``#id`` fragment."""
        self._admit(FragmentKind.ID)
        self._id = name
        self._advance(FragmentKind.ID)
        return self

    def add_class(self, name: str) -> SelectorBuilder:
        """Append a ``.class`` fragment."""
        self._admit(FragmentKind.CLASS)
        self._classes.append(name)
        self._advance(FragmentKind.CLASS)
        return self

    def add_attribute(self, spec: str) -> SelectorBuilder:
        """Append an ``[attr]`` fragment; *spec* is used verbatim."""
        self._admit(FragmentKind.ATTRIBUTE)
        self._attributes.append(spec)
        self._advance(FragmentKind.ATTRIBUTE)
        return self

    def add_pseudo_class(self, name: str) -> SelectorBuilder:
        """Append a ``:pseudo-class`` fragment."""
        self._admit(FragmentKind.PSEUDO_CLASS)
        self._pseudo_classes.append(name)
        self._advance(FragmentKind.PSEUDO_CLASS)
        return self

    def set_pseudo_element(self, name: str) -> SelectorBuilder:
        """Set the ``::pseudo-element`` fragment."""
        self._admit(FragmentKind.PSEUDO_ELEMENT)
        self._pseudo_element = name
        self._advance(FragmentKind.PSEUDO_ELEMENT)
        return self

    # Short names matching the facade, so chains read like CSS.
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    # --- combinators ----------------------------------------------------------

    def combine(
        self,
        left: SelectorBuilder,
        token: Combinator | str,
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        """Join *left* and *right* with *token* into this builder's head.

        The joined text takes the element position, so the result renders
        on its own, can be combined again, and can still receive id, class,
        attribute and pseudo fragments.

        Strict combinators are the default: a *token* other than ``" "``,
        ``">"``, ``"~"`` or ``"+"`` raises UnknownCombinatorError.  Pass a
        ``SelkitConfig(strict_combinators=False)`` to store any token verbatim.
        """
        combinator = Combinator.parse(token)
        if combinator is not None:
            token = combinator.value
        elif self._config.strict_combinators:
            raise UnknownCombinatorError(token)
        self._admit(FragmentKind.ELEMENT)
        self._combined = f"{left.stringify()} {token} {right.stringify()}"
        self._advance(FragmentKind.ELEMENT)
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector; an empty builder renders ``""``."""
        parts: list[str] = []
        if self._combined is not None:
            parts.append(self._combined)
        elif self._element is not None:
            parts.append(self._element)
        if self._id is not None:
            parts.append(f"#{self._id}")
        if self._classes:
            parts.append("." + ".".join(self._classes))
        if self._attributes:
            parts.append("[" + "][".join(self._attributes) + "]")
        if self._pseudo_classes:
            parts.append(":" + ":".join(self._pseudo_classes))
        if self._pseudo_element is not None:
            parts.append(f"::{self._pseudo_element}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"
