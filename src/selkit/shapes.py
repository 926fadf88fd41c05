"""Rectangle value and factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rectangle:
    """Width and height stored as given; no sign or finiteness checks."""

    width: Any
    height: Any

    def area(self) -> Any:
        return self.width * self.height


def make_rectangle(width: Any, height: Any) -> Rectangle:
    """Return a rectangle with the given sides.

    Example:
        >>> r = make_rectangle(10, 20)
        >>> r.width, r.height, r.area()
        (10, 20, 200)
    """
    return Rectangle(width=width, height=height)
