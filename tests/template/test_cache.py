"""Tests for the parse cache."""

from stache.template.cache import TemplateCache, clear_default_cache, default_cache
from stache.template.tokens import Text, Variable
from stache.types import Delimiters


class TestTemplateCache:

    def test_hit_returns_same_tree(self):
        cache = TemplateCache()
        first = cache.get_or_parse("a{{b}}")
        second = cache.get_or_parse("a{{b}}")
        assert first is second
        assert first == (Text("a"), Variable("b"))
        assert len(cache) == 1

    def test_delimiters_are_part_of_key(self):
        cache = TemplateCache()
        default = cache.get_or_parse("<%b%>{{b}}")
        custom = cache.get_or_parse("<%b%>{{b}}", Delimiters("<%", "%>"))
        assert default != custom
        assert len(cache) == 2

    def test_clear_then_reparse_is_identical(self):
        cache = TemplateCache()
        before = cache.get_or_parse("{{#a}}{{x}}{{/a}}")
        cache.clear()
        assert len(cache) == 0
        after = cache.get_or_parse("{{#a}}{{x}}{{/a}}")
        assert before == after
        assert before is not after

    def test_disabled_by_flag(self):
        cache = TemplateCache(enabled=False)
        cache.get_or_parse("x")
        assert len(cache) == 0

    def test_env_overrides_flag(self, monkeypatch):
        monkeypatch.setenv("STACHE_CACHE", "off")
        cache = TemplateCache(enabled=True)
        assert not cache.enabled
        monkeypatch.setenv("STACHE_CACHE", "1")
        assert TemplateCache(enabled=False).enabled

    def test_default_cache_is_shared(self):
        assert default_cache() is default_cache()
        default_cache().get_or_parse("x")
        clear_default_cache()
        assert len(default_cache()) == 0
