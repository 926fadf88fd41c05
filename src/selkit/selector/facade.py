"""Factory functions that start selector chains.

Callers never construct ``SelectorBuilder`` directly; each function here
creates a fresh builder and applies one fragment::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")
"""

from __future__ import annotations

from selkit.config import SelkitConfig
from selkit.selector.builder import SelectorBuilder
from selkit.selector.model import Combinator

__all__ = [
    "SelectorFacade",
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


class SelectorFacade:
    """Stateless entry point; *config* is handed to every builder it creates."""

    def __init__(self, config: SelkitConfig | None = None) -> None:
        self.config = config or SelkitConfig()

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(self.config)

    def element(self, name: str) -> SelectorBuilder:
        return self._new().set_element(name)

    def id(self, name: str) -> SelectorBuilder:
        return self._new().set_id(name)

    def class_(self, name: str) -> SelectorBuilder:
        return self._new().add_class(name)

    def attr(self, spec: str) -> SelectorBuilder:
        return self._new().add_attribute(spec)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return self._new().add_pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return self._new().set_pseudo_element(name)

    def combine(
        self,
        left: SelectorBuilder,
        token: Combinator | str,
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        return self._new().combine(left, token, right)


css_selector_builder = SelectorFacade()

element = css_selector_builder.element
id = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
