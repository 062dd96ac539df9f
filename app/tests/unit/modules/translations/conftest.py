"""Feature-level fixtures for translation tests."""

from typing import Any, List, Tuple

import pytest

from infrastructure.cache import InMemoryCache
from modules.translations.service import TranslationService
from modules.translations.store import InMemoryTranslationStore

KNOWN_CONFIG_IDS = {1, 2}


class RecordingCache(InMemoryCache):
    """In-memory cache that records every call it receives."""

    def __init__(self):
        super().__init__()
        self.calls: List[Tuple[str, Any]] = []

    def get(self, key):
        self.calls.append(("get", key))
        return super().get(key)

    def set(self, key, value, ttl_seconds):
        self.calls.append(("set", (key, ttl_seconds)))
        super().set(key, value, ttl_seconds)

    def delete(self, key):
        self.calls.append(("delete", key))
        super().delete(key)

    def delete_by_prefix(self, pattern):
        self.calls.append(("delete_by_prefix", pattern))
        super().delete_by_prefix(pattern)

    def operations(self, name: str) -> list:
        return [arg for op, arg in self.calls if op == name]


@pytest.fixture
def cache():
    return RecordingCache()


@pytest.fixture
def store():
    return InMemoryTranslationStore(config_exists=lambda cid: cid in KNOWN_CONFIG_IDS)


@pytest.fixture
def service(store, cache, language_resolver):
    return TranslationService(store=store, cache=cache, language_resolver=language_resolver)


@pytest.fixture
def translation_fields():
    """Valid content for a new translation."""
    return {
        "title": "示例站点",
        "author": "作者",
        "description": "站点描述",
        "keywords": ["示例", "站点"],
    }


@pytest.fixture
def create(service, translation_fields):
    """Create a translation with valid content, overriding fields as needed."""

    def _create(config_id=1, language_code="zh-cn", **overrides):
        fields = {**translation_fields, **overrides}
        return service.create_translation(config_id, language_code, **fields)

    return _create
