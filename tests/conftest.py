import pytest

from stache.template.cache import clear_default_cache


@pytest.fixture(autouse=True)
def _fresh_cache(monkeypatch):
    # tests must not depend on entries left by earlier tests or on the caller's env
    monkeypatch.delenv("STACHE_CACHE", raising=False)
    clear_default_cache()
    yield
    clear_default_cache()
