"""selkit: CSS selector builder, rectangle factory and JSON helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selkit.config import SelkitConfig
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
from selkit.jsonbridge import deserialize, serialize
from selkit.selector import Combinator, SelectorFacade, css_selector_builder
from selkit.shapes import Rectangle, make_rectangle

__all__ = [
    "__version__",
    "SelkitConfig",
    # errors
    "SelkitError",
    "SelectorError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "UnknownCombinatorError",
    "ParseError",
    "SerializationError",
    "TemplateError",
    # selectors
    "Combinator",
    "SelectorFacade",
    "css_selector_builder",
    # shapes
    "Rectangle",
    "make_rectangle",
    # json
    "serialize",
    "deserialize",
]
