"""Tests for the public parse/render/clear_cache entry points."""

import pytest

import stache
from stache import InputError, RenderOptions, StructuralError, clear_cache, parse, render
from stache.template.cache import default_cache
from stache.template.tokens import Section, Text, Variable


class TestRender:

    def test_hello(self):
        assert render("Hello {{name}}!", {"name": "World"}) == "Hello World!"

    def test_escaped_and_raw(self):
        view = {"x": "a & b"}
        assert render("{{x}}", view) == "a &amp; b"
        assert render("{{{x}}}", view) == "a & b"
        assert render("{{&x}}", view) == "a & b"

    def test_partial(self):
        assert render("{{>p}}", {"title": "T"}, {"p": "<h1>{{title}}</h1>"}) == "<h1>T</h1>"
        assert render("{{>p}}", {"title": "T"}, {}) == ""
        assert render("{{>p}}", {"title": "T"}) == ""

    def test_missing_template(self):
        with pytest.raises(InputError, match="Template"):
            render(None, {})

    def test_missing_view(self):
        with pytest.raises(InputError, match="View"):
            render("x", None)

    def test_empty_view_is_allowed(self):
        assert render("[{{x}}]", {}) == "[]"

    def test_structural_error_propagates(self):
        with pytest.raises(StructuralError):
            render("{{#a}}x{{/b}}", {})

    def test_structural_error_in_partial(self):
        with pytest.raises(StructuralError):
            render("{{>p}}", {}, {"p": "{{#open}}"})

    def test_partials_must_be_mapping(self):
        with pytest.raises(InputError):
            render("x", {}, ["p"])


class TestOptions:

    def test_tags_option_from_mapping(self):
        assert render("<%name%> {{name}}", {"name": "N"}, options={"tags": ("<%", "%>")}) == "N {{name}}"

    def test_tags_option_from_string(self):
        assert render("[[x]]", {"x": 1}, options={"tags": "[[ ]]"}) == "1"

    def test_partials_follow_tags_option(self):
        result = render("<%>p%>", {"x": 2}, {"p": "<%x%>"}, RenderOptions(tags=("<%", "%>")))
        assert result == "2"

    def test_escape_option_by_name(self):
        assert render("{{x}}", {"x": "<>"}, options={"escape": "none"}) == "<>"

    def test_escape_option_callable(self):
        assert render("{{x}}|{{{x}}}", {"x": "ab"}, options={"escape": str.upper}) == "AB|ab"

    def test_unknown_option_key(self):
        with pytest.raises(InputError, match="Unknown render option"):
            render("x", {}, options={"lambdas": True})

    def test_unknown_escape_name(self):
        with pytest.raises(InputError):
            render("{{x}}", {}, options={"escape": "latex"})

    @pytest.mark.parametrize("tags", ["{{", ("", "}}"), ["a", "b", "c"]])
    def test_invalid_tags(self, tags):
        with pytest.raises(InputError):
            render("x", {}, options={"tags": tags})


class TestParseAndCache:

    def test_parse_default_delimiters(self):
        assert parse("a{{#s}}{{v}}{{/s}}") == (
            Text("a"),
            Section("s", children=(Variable("v"),)),
        )

    def test_parse_is_cached(self):
        first = parse("{{x}}")
        assert parse("{{x}}") is first
        assert parse("{{x}}", ("{{", "}}")) is first

    def test_clear_cache_then_reparse(self):
        first = parse("{{#a}}{{x}}{{/a}}")
        clear_cache()
        assert len(default_cache()) == 0
        second = parse("{{#a}}{{x}}{{/a}}")
        assert second == first
        assert second is not first

    def test_parse_missing_template(self):
        with pytest.raises(InputError):
            parse(None)

    def test_render_populates_cache(self):
        render("{{x}}", {"x": 1})
        assert len(default_cache()) == 1


class TestScenarios:

    def test_welcome(self):
        template = "Welcome{{#show}} {{name}}{{/show}}!"
        assert render(template, {"show": True, "name": "John"}) == "Welcome John!"
        assert render(template, {"show": False, "name": "John"}) == "Welcome!"

    def test_no_items(self):
        template = "{{^items}}No items.{{/items}}"
        assert render(template, {"items": []}) == "No items."
        assert render(template, {"items": ["A", "B"]}) == ""

    def test_items(self):
        view = {"items": [{"name": "X"}, {"name": "Y"}]}
        assert render("{{#items}} {{name}}{{/items}}", view) == " X Y"

    def test_unclosed(self):
        with pytest.raises(StructuralError, match="'a'"):
            render("{{#a}}x", {})

    def test_package_exports(self):
        assert stache.render is render
        assert stache.DEFAULT_DELIMITERS.open == "{{"


class Faulty:
    @property
    def bad(self):
        raise ValueError("broken property")


class TestMissingData:

    def test_raising_property_renders_empty(self):
        """A record attribute that raises never fails the render."""
        assert render("[{{o.bad}}]", {"o": Faulty()}) == "[]"

    def test_null_item_dot(self):
        assert render("{{#items}}[{{.}}]{{/items}}", {"items": ["a", None]}) == "[a][]"
