"""Infrastructure modules for the site metadata service.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings, CacheSettings)
- logging: Structured logging setup and request context
- errors: Domain error taxonomy (ServiceError and subclasses)
- i18n: Language negotiation (LanguageResolver)
- cache: Cache port, Redis adapter and backend selection
- services: Dependency injection providers (get_settings, SettingsDep, ...)

Subpackages are imported explicitly (``from infrastructure.cache import ...``);
this package re-exports nothing so feature modules can depend on individual
components without pulling in the dependency providers.
"""
