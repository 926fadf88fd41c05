"""Tests for the selector factory functions."""

import pytest

from selkit import css_selector_builder as builder
from selkit.config import SelkitConfig
from selkit.errors import DuplicateFragmentError, OutOfOrderError
from selkit.selector import facade
from selkit.selector.builder import SelectorBuilder
from selkit.selector.facade import SelectorFacade


class TestFactories:
    def test_each_call_returns_fresh_builder(self):
        a = builder.element("a")
        b = builder.element("a")
        assert a is not b
        assert isinstance(a, SelectorBuilder)

    def test_id_class_chain(self):
        assert builder.id("main").class_("container").class_("editable").stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        assert builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify() == 'a[href$=".png"]:focus'

    def test_starting_points(self):
        assert builder.class_("x").stringify() == ".x"
        assert builder.attr("disabled").stringify() == "[disabled]"
        assert builder.pseudo_class("root").stringify() == ":root"
        assert builder.pseudo_element("selection").stringify() == "::selection"

    def test_combine(self):
        result = builder.combine(builder.element("div").id("main"), "+", builder.element("table").id("data"))
        assert result.stringify() == "div#main + table#data"

    def test_duplicate_id(self):
        with pytest.raises(DuplicateFragmentError):
            builder.element("a").id("x").id("y")

    def test_class_before_id(self):
        with pytest.raises(OutOfOrderError):
            builder.element("a").class_("c").id("x")

    def test_chains_are_independent(self):
        first = builder.element("a")
        builder.element("b").id("x")
        first.id("y")
        assert first.stringify() == "a#y"


class TestModuleFunctions:
    def test_bound_to_default_facade(self):
        assert facade.element("p").class_("lead").stringify() == "p.lead"
        assert facade.id("x").stringify() == "#x"
        assert facade.combine(facade.element("ul"), ">", facade.element("li")).stringify() == "ul > li"


class TestFacadeConfig:
    def test_config_reaches_builders(self):
        lenient = SelectorFacade(SelkitConfig(strict_combinators=False))
        result = lenient.combine(lenient.element("a"), "||", lenient.element("b"))
        assert result.stringify() == "a || b"

    def test_default_config(self):
        assert SelectorFacade().config == SelkitConfig()
