"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure and
content services. Each provider builds its instance once per process from
settings and the providers it depends on; nothing is a module-level global.
"""

from functools import lru_cache

from infrastructure.cache import CacheBackend, resolve_cache_backend
from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver, create_language_resolver
from modules.configs.service import ConfigResolutionService
from modules.configs.store import InMemoryConfigStore
from modules.translations.service import TranslationService
from modules.translations.store import InMemoryTranslationStore


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/languages")
        def list_languages(settings: SettingsDep):
            return settings.i18n.supported_languages

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_language_resolver() -> LanguageResolver:
    """
    Get application-scoped language resolver singleton.

    Returns:
        LanguageResolver: Resolver built from the i18n settings.
    """
    return create_language_resolver(get_settings())


@lru_cache
def get_cache_backend() -> CacheBackend:
    """
    Get the cache backend resolved once at startup.

    The returned backend carries the capability flag that decides whether
    localized reads are served.

    Returns:
        CacheBackend: Cache instance plus capability.
    """
    return resolve_cache_backend(get_settings())


@lru_cache
def get_config_store() -> InMemoryConfigStore:
    """Get the application-scoped configuration and domain store."""
    return InMemoryConfigStore()


@lru_cache
def get_translation_store() -> InMemoryTranslationStore:
    """
    Get the application-scoped translation store.

    The store enforces the configuration foreign key against the config
    store, and config deletes cascade to it.
    """
    config_store = get_config_store()
    store = InMemoryTranslationStore(config_exists=config_store.config_exists)
    config_store.add_delete_hook(store.delete_all_for_config)
    return store


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service singleton.

    Usage:
        @router.get("/configs/{config_id}/translations")
        def list_translations(config_id: int, service: TranslationServiceDep):
            return service.get_all_translations(config_id)
    """
    return TranslationService(
        store=get_translation_store(),
        cache=get_cache_backend().cache,
        language_resolver=get_language_resolver(),
    )


@lru_cache
def get_config_service() -> ConfigResolutionService:
    """
    Get application-scoped config resolution facade.

    Returns:
        ConfigResolutionService: Facade with multilingual reads enabled only
            when the cache backend is available.
    """
    return ConfigResolutionService(
        config_store=get_config_store(),
        translation_service=get_translation_service(),
        language_resolver=get_language_resolver(),
        multilingual_enabled=get_cache_backend().is_available,
    )
