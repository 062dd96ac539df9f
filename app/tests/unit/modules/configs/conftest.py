"""Feature-level fixtures for configuration tests."""

import pytest

from infrastructure.cache import InMemoryCache
from modules.configs.service import ConfigResolutionService
from modules.configs.store import InMemoryConfigStore
from modules.translations.service import TranslationService
from modules.translations.store import InMemoryTranslationStore


@pytest.fixture
def config_store():
    return InMemoryConfigStore()


@pytest.fixture
def translation_store(config_store):
    store = InMemoryTranslationStore(config_exists=config_store.config_exists)
    config_store.add_delete_hook(store.delete_all_for_config)
    return store


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def translation_service(translation_store, cache, language_resolver):
    return TranslationService(translation_store, cache, language_resolver)


@pytest.fixture
def config_service(config_store, translation_service, language_resolver):
    return ConfigResolutionService(
        config_store=config_store,
        translation_service=translation_service,
        language_resolver=language_resolver,
        multilingual_enabled=True,
    )


@pytest.fixture
def offline_config_service(config_store, translation_service, language_resolver):
    """Facade built when no cache backend was available at startup."""
    return ConfigResolutionService(
        config_store=config_store,
        translation_service=translation_service,
        language_resolver=language_resolver,
        multilingual_enabled=False,
    )


@pytest.fixture
def add_translation(translation_service):
    def _add(config_id, language_code, title="标题"):
        return translation_service.create_translation(
            config_id,
            language_code,
            title=title,
            author="作者",
            description="描述",
            keywords=["关键词"],
        )

    return _add
