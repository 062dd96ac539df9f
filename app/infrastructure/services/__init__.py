"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LanguageResolverDep,
    CacheBackendDep,
    TranslationServiceDep,
    ConfigServiceDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_language_resolver,
    get_cache_backend,
    get_config_store,
    get_translation_store,
    get_translation_service,
    get_config_service,
)

__all__ = [
    "SettingsDep",
    "LanguageResolverDep",
    "CacheBackendDep",
    "TranslationServiceDep",
    "ConfigServiceDep",
    "get_settings",
    "get_language_resolver",
    "get_cache_backend",
    "get_config_store",
    "get_translation_store",
    "get_translation_service",
    "get_config_service",
]
