from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelkitConfig:
    strict_combinators: bool = True
    json_indent: int | None = None  # None renders compact JSON
    ensure_ascii: bool = False
