"""Root-level fixtures shared by unit and integration tests.

Logging is configured before any application module is imported so that
module-level loggers bind against the suppressed test configuration.
"""

import pytest

from infrastructure.logging import configure_logging

configure_logging()

from infrastructure.i18n import LanguageResolver  # noqa: E402
from infrastructure.services import providers  # noqa: E402

PROVIDERS = (
    providers.get_settings,
    providers.get_language_resolver,
    providers.get_cache_backend,
    providers.get_config_store,
    providers.get_translation_store,
    providers.get_translation_service,
    providers.get_config_service,
)


def clear_provider_caches() -> None:
    for provider in PROVIDERS:
        provider.cache_clear()


@pytest.fixture
def language_resolver():
    """Resolver with the built-in language configuration."""
    return LanguageResolver(
        default_language="zh-cn",
        supported_languages=["zh-cn", "en-us", "ja-jp"],
    )


@pytest.fixture
def reset_providers():
    """Clear every application-scoped provider before and after a test."""
    clear_provider_caches()
    yield
    clear_provider_caches()


@pytest.fixture
def app_env(monkeypatch):
    """Environment for an application using the in-memory cache backend."""
    monkeypatch.setenv("CACHE_BACKEND", "memory")
    monkeypatch.setenv("DEFAULT_LANGUAGE", "zh-cn")
    monkeypatch.setenv("SUPPORTED_LANGUAGES", "zh-cn,en-us,ja-jp")
    monkeypatch.setenv("PREFIX", "test-")
    return monkeypatch
