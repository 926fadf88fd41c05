"""JSON helpers: compact serialisation and template-typed deserialisation.

``serialize`` produces the same text a browser's ``JSON.stringify`` would
for plain data: no whitespace, keys in mapping order, non-ASCII characters
left as-is.  ``deserialize`` parses text and hands the resulting fields to a
new instance of a *capability template* class, so the value gains that
class's methods without its constructor being run.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selkit.config import SelkitConfig
from selkit.errors import ParseError, SerializationError, TemplateError

__all__ = ["serialize", "parse", "deserialize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_object(obj: Any) -> Any:
    """``json.dumps`` fallback for values that are not plain data."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if not callable(obj) and hasattr(obj, "__dict__"):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any, config: SelkitConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Raises SerializationError for NaN/infinite floats, circular references,
    and objects that expose no fields.
    """
    cfg = config or SelkitConfig()
    separators = (",", ":") if cfg.json_indent is None else (",", ": ")
    try:
        return json.dumps(
            value,
            separators=separators,
            indent=cfg.json_indent,
            ensure_ascii=cfg.ensure_ascii,
            allow_nan=False,
            default=_encode_object,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc


def parse(text: str) -> Any:
    """Parse JSON *text* into plain data, raising ParseError on bad input."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Rejected JSON at line %d column %d: %s", exc.lineno, exc.colno, exc.msg)
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno
        ) from exc


def deserialize(template: type[T], text: str) -> T:
    """Parse *text* and return an instance of *template* carrying its fields.

    ``template.__init__`` is not called and the fields are not checked
    against what the template's methods expect; a missing field surfaces
    as ``AttributeError`` when a method reads it.
    """
    if not isinstance(template, type):
        raise TemplateError(f"Template must be a class, got {type(template).__name__}")

    data = parse(text)
    if not isinstance(data, dict):
        raise TemplateError(
            f"Expected a JSON object for {template.__name__}, "
            f"got {type(data).__name__}"
        )

    instance = template.__new__(template)
    fields = getattr(instance, "__dict__", None)
    if fields is None:
        raise TemplateError(f"{template.__name__} instances cannot hold arbitrary fields")
    # Dunder keys land as plain fields, frozen dataclasses included.
    fields.update(data)
    return instance
