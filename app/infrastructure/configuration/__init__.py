"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the service
using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Language negotiation settings class
    CacheSettings: Cache backend settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    default_language = settings.i18n.default_language
    redis_host = settings.cache.REDIS_HOST

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.i18n import I18nSettings
from infrastructure.configuration.infrastructure.cache import CacheSettings

__all__ = ["Settings", "I18nSettings", "CacheSettings"]
