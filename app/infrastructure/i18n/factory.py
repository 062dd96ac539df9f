"""Factory functions for creating i18n components."""

from typing import TYPE_CHECKING

import structlog
from infrastructure.i18n.resolvers import LanguageResolver

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


def create_language_resolver(settings: "Settings") -> LanguageResolver:
    """Create a LanguageResolver from application settings.

    Reads ``DEFAULT_LANGUAGE`` and the comma-separated ``SUPPORTED_LANGUAGES``
    (both trimmed; blank values fall back to built-in defaults).

    Args:
        settings: Settings instance.

    Returns:
        LanguageResolver: Configured resolver.

    Usage:
        from infrastructure.services import get_settings

        resolver = create_language_resolver(get_settings())
        resolver.resolve("en_US", None)  # -> "en-us"
    """
    resolver = LanguageResolver(
        default_language=settings.i18n.default_language,
        supported_languages=settings.i18n.supported_languages,
    )
    logger.info(
        "language_resolver_created",
        default_language=resolver.get_default_language(),
        supported_languages=resolver.get_supported_languages(),
    )
    return resolver
