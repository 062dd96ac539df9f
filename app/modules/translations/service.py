"""Translation service.

Owns the lifecycle of per-language content for configurations and keeps the
cache coherent with the store. Writes always invalidate the affected cache
entries; only reads populate the cache.
"""

from typing import Any, Dict, List, Optional

from infrastructure.cache import CachePort
from infrastructure.errors import ConflictError, NotFoundError, ValidationError
from infrastructure.i18n import LanguageResolver
from infrastructure.logging import get_module_logger
from modules.translations.keys import (
    CACHE_TTL_SECONDS,
    build_cache_key,
    build_config_pattern,
)
from modules.translations.models import (
    TranslatedContent,
    Translation,
    encode_keywords,
)
from modules.translations.store import (
    ForeignKeyConstraintError,
    TranslationStore,
    UniqueConstraintError,
)
from modules.translations.validation import (
    validate_new_translation,
    validate_translation_changes,
)

logger = get_module_logger()


class TranslationService:
    """Create, read, update and delete translations with cache coherence.

    Args:
        store: Translation store.
        cache: Cache backend (a NullCache when no cache is available).
        language_resolver: Resolver holding the default and supported languages.
        ttl_seconds: TTL applied when populating the cache.
    """

    def __init__(
        self,
        store: TranslationStore,
        cache: CachePort,
        language_resolver: LanguageResolver,
        ttl_seconds: int = CACHE_TTL_SECONDS,
    ):
        self.store = store
        self.cache = cache
        self.language_resolver = language_resolver
        self.ttl_seconds = ttl_seconds

    def _require_supported(self, language_code: str) -> str:
        normalized = self.language_resolver.normalize(language_code)
        if not self.language_resolver.is_supported(normalized):
            raise ValidationError(
                f"Unsupported language: {normalized}",
                code="UNSUPPORTED_LANGUAGE",
                details={
                    "field": "language_code",
                    "language_code": normalized,
                    "supported_languages": self.language_resolver.get_supported_languages(),
                },
            )
        return normalized

    def _invalidate(self, config_id: int, language_code: str) -> None:
        key = build_cache_key(config_id, language_code)
        self.cache.delete(key)
        logger.debug("translation_cache_invalidated", cache_key=key)

    def create_translation(
        self,
        config_id: int,
        language_code: str,
        title: str,
        author: str,
        description: str,
        keywords: List[str],
    ) -> Translation:
        """Create a translation for a configuration.

        Args:
            config_id: Owning configuration.
            language_code: Target language; normalized before use.
            title: Title (at most 200 characters).
            author: Author (at most 100 characters).
            description: Description (at most 1000 characters).
            keywords: Non-empty list of keyword strings.

        Returns:
            The persisted translation.

        Raises:
            ValidationError: Unsupported language or invalid content.
            ConflictError: A translation already exists for the language.
            NotFoundError: The configuration does not exist.
        """
        normalized = self._require_supported(language_code)
        validate_new_translation(
            {
                "title": title,
                "author": author,
                "description": description,
                "keywords": keywords,
            }
        )

        if self.store.find_translation(config_id, normalized) is not None:
            raise ConflictError(
                f"Translation for language {normalized} already exists",
                code="TRANSLATION_EXISTS",
                details={"config_id": config_id, "language_code": normalized},
            )

        translation = Translation(
            config_id=config_id,
            language_code=normalized,
            title=title,
            author=author,
            description=description,
            keywords=list(keywords),
        )
        try:
            record = self.store.create_translation(translation.to_record())
        except UniqueConstraintError as e:
            raise ConflictError(
                f"Translation for language {normalized} already exists",
                code="TRANSLATION_EXISTS",
                details={"config_id": config_id, "language_code": normalized},
            ) from e
        except ForeignKeyConstraintError as e:
            raise NotFoundError(
                f"Configuration {config_id} not found",
                code="CONFIG_NOT_FOUND",
                details={"config_id": config_id},
            ) from e

        self._invalidate(config_id, normalized)
        logger.info(
            "translation_created",
            config_id=config_id,
            language_code=normalized,
            translation_id=record.id,
        )
        return Translation.from_record(record)

    def update_translation(
        self, config_id: int, language_code: str, fields: Dict[str, Any]
    ) -> Translation:
        """Apply a partial update to an existing translation.

        ``None`` values are treated as not supplied. An update with no fields
        leaves the record unchanged but still invalidates its cache entry.

        Raises:
            NotFoundError: No translation exists for the pair.
            ValidationError: A supplied field is unknown, empty or invalid.
        """
        normalized = self.language_resolver.normalize(language_code)
        existing = self.store.find_translation(config_id, normalized)
        if existing is None:
            raise NotFoundError(
                f"Translation for language {normalized} not found",
                code="TRANSLATION_NOT_FOUND",
                details={"config_id": config_id, "language_code": normalized},
            )

        changes = {name: value for name, value in fields.items() if value is not None}
        validate_translation_changes(changes)

        if "keywords" in changes:
            changes["keywords"] = encode_keywords(changes["keywords"])

        if changes:
            updated = self.store.update_translation(existing.id, changes)
            if updated is None:
                raise NotFoundError(
                    f"Translation for language {normalized} not found",
                    code="TRANSLATION_NOT_FOUND",
                    details={"config_id": config_id, "language_code": normalized},
                )
        else:
            updated = existing

        self._invalidate(config_id, normalized)
        logger.info(
            "translation_updated",
            config_id=config_id,
            language_code=normalized,
            fields=sorted(changes),
        )
        return Translation.from_record(updated)

    def get_translation(
        self, config_id: int, language_code: str
    ) -> Optional[Translation]:
        """Read one translation, cache first.

        On a cache hit the store is not consulted. On a miss the store result
        is cached for ``ttl_seconds``; absent translations are not cached.

        Returns:
            The translation, or None if absent.
        """
        normalized = self.language_resolver.normalize(language_code)
        key = build_cache_key(config_id, normalized)

        cached = self.cache.get(key)
        if cached is not None:
            try:
                return Translation.from_dict(cached)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("translation_cache_entry_invalid", cache_key=key, error=str(e))

        record = self.store.find_translation(config_id, normalized)
        if record is None:
            return None

        translation = Translation.from_record(record)
        self.cache.set(key, translation.to_dict(), self.ttl_seconds)
        return translation

    def get_translation_with_fallback(
        self, config_id: int, language_code: str
    ) -> TranslatedContent:
        """Read a translation, falling back to the default language once.

        Raises:
            NotFoundError: Neither the requested nor the default language exists.
        """
        normalized = self.language_resolver.normalize(language_code)
        translation = self.get_translation(config_id, normalized)
        if translation is not None:
            return TranslatedContent(translation, normalized)

        default_language = self.language_resolver.get_default_language()
        if default_language != normalized:
            translation = self.get_translation(config_id, default_language)
            if translation is not None:
                logger.info(
                    "language_fallback",
                    config_id=config_id,
                    requested_language=normalized,
                    actual_language=default_language,
                )
                return TranslatedContent(translation, default_language)

        raise NotFoundError(
            f"No translation found for configuration {config_id}",
            code="TRANSLATION_NOT_FOUND",
            details={
                "config_id": config_id,
                "requested_language": normalized,
                "default_language": default_language,
            },
        )

    def get_all_translations(self, config_id: int) -> List[Translation]:
        """All translations of a configuration ordered by language code."""
        records = self.store.list_translations(config_id)
        translations = [Translation.from_record(record) for record in records]
        return sorted(translations, key=lambda t: t.language_code)

    def delete_translation(self, config_id: int, language_code: str) -> None:
        """Delete one translation.

        The default-language translation cannot be deleted while other
        translations of the configuration exist.

        Raises:
            ValidationError: Deleting the protected default translation.
            NotFoundError: Nothing was deleted.
        """
        normalized = self.language_resolver.normalize(language_code)
        default_language = self.language_resolver.get_default_language()

        if normalized == default_language and self.store.count_translations(config_id) > 1:
            raise ValidationError(
                "Cannot delete the default language translation while other translations exist",
                code="DEFAULT_TRANSLATION_PROTECTED",
                details={"config_id": config_id, "language_code": normalized},
            )

        deleted = self.store.delete_translation(config_id, normalized)
        if deleted == 0:
            raise NotFoundError(
                f"Translation for language {normalized} not found",
                code="TRANSLATION_NOT_FOUND",
                details={"config_id": config_id, "language_code": normalized},
            )

        self._invalidate(config_id, normalized)
        logger.info("translation_deleted", config_id=config_id, language_code=normalized)

    def invalidate_all_caches_for_config(self, config_id: int) -> None:
        """Drop every cached language variant of a configuration."""
        pattern = build_config_pattern(config_id)
        self.cache.delete_by_prefix(pattern)
        logger.info("translation_caches_invalidated", config_id=config_id, pattern=pattern)
