"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends
from infrastructure.cache import CacheBackend
from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver
from infrastructure.services.providers import (
    get_cache_backend,
    get_config_service,
    get_language_resolver,
    get_settings,
    get_translation_service,
)
from modules.configs.service import ConfigResolutionService
from modules.translations.service import TranslationService

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Language resolver dependency
LanguageResolverDep = Annotated[LanguageResolver, Depends(get_language_resolver)]

# Cache backend and capability flag resolved at startup
CacheBackendDep = Annotated[CacheBackend, Depends(get_cache_backend)]

# Content services
TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]
ConfigServiceDep = Annotated[ConfigResolutionService, Depends(get_config_service)]

__all__ = [
    "SettingsDep",
    "LanguageResolverDep",
    "CacheBackendDep",
    "TranslationServiceDep",
    "ConfigServiceDep",
]
