"""Tests for escaping strategies."""

import pytest

from stache.errors import InputError
from stache.template.escaping import ESCAPERS, html_escape, no_escape, resolve_escaper


class TestHtmlEscape:

    def test_all_characters(self):
        assert html_escape("&<>\"'/`=") == "&amp;&lt;&gt;&quot;&#39;&#x2F;&#x60;&#x3D;"

    def test_ampersand_not_double_escaped(self):
        assert html_escape("<") == "&lt;"
        assert html_escape("&lt;") == "&amp;lt;"

    def test_plain_text_unchanged(self):
        assert html_escape("Hello World") == "Hello World"


class TestResolveEscaper:

    def test_default_is_html(self):
        assert resolve_escaper(None) is html_escape

    def test_by_name(self):
        assert resolve_escaper("html") is html_escape
        assert resolve_escaper("none") is no_escape
        assert set(ESCAPERS) == {"html", "none"}

    def test_callable_passes_through(self):
        upper = str.upper
        assert resolve_escaper(upper) is upper

    def test_unknown_name(self):
        with pytest.raises(InputError, match="Unknown escape strategy 'xml'"):
            resolve_escaper("xml")

    def test_wrong_type(self):
        with pytest.raises(InputError):
            resolve_escaper(42)
