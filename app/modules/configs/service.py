"""Config resolution facade.

Combines language-independent configuration fields with the translation
served for the caller's language. Localized reads require the multilingual
capability resolved at startup; without it they raise
``MultilingualUnavailableError`` and callers use the ``*_view`` methods,
which return configurations without translated content.
"""

from typing import Any, Dict, List, Optional

from infrastructure.errors import (
    ConflictError,
    MultilingualUnavailableError,
    NotFoundError,
    ValidationError,
)
from infrastructure.i18n import LanguageResolver
from infrastructure.logging import bind_content_context, get_module_logger
from modules.configs.domains import candidate_domains, extract_domain
from modules.configs.models import Configuration, Domain, DomainConfig, LocalizedConfig
from modules.configs.store import ConfigStore
from modules.translations.models import Translation
from modules.translations.service import TranslationService
from modules.translations.store import ForeignKeyConstraintError, UniqueConstraintError

logger = get_module_logger()


def _config_not_found(config_id: int) -> NotFoundError:
    return NotFoundError(
        f"Configuration {config_id} not found",
        code="CONFIG_NOT_FOUND",
        details={"config_id": config_id},
    )


def _require_mapping(name: str, value: Any) -> None:
    if not isinstance(value, dict):
        raise ValidationError(
            f"Field {name} must be an object",
            details={"field": name},
        )


class ConfigResolutionService:
    """Serve configurations merged with their localized content.

    Args:
        config_store: Configuration and domain store.
        translation_service: Translation service used for localized reads
            and cache invalidation.
        language_resolver: Resolver for requested languages.
        multilingual_enabled: Capability flag resolved at startup.
    """

    def __init__(
        self,
        config_store: ConfigStore,
        translation_service: TranslationService,
        language_resolver: LanguageResolver,
        multilingual_enabled: bool = True,
    ):
        self.config_store = config_store
        self.translation_service = translation_service
        self.language_resolver = language_resolver
        self.multilingual_enabled = multilingual_enabled

    def _require_multilingual(self) -> None:
        if not self.multilingual_enabled:
            raise MultilingualUnavailableError(
                "Multilingual content is unavailable: no cache backend"
            )

    def _require_config(self, config_id: int) -> Configuration:
        config = self.config_store.find_config(config_id)
        if config is None:
            raise _config_not_found(config_id)
        return config

    def merge(
        self,
        config: Configuration,
        translation: Optional[Translation],
        language: Optional[str],
    ) -> LocalizedConfig:
        """Combine configuration fields with translated fields and the language."""
        return LocalizedConfig(config=config, translation=translation, language=language)

    def _localize(self, config: Configuration, language: Optional[str]) -> LocalizedConfig:
        requested = self.language_resolver.resolve(explicit=language)
        with bind_content_context(config.id, requested):
            content = self.translation_service.get_translation_with_fallback(
                config.id, requested
            )
        return self.merge(config, content.translation, content.actual_language)

    def get_config_by_id(
        self, config_id: int, language: Optional[str] = None
    ) -> LocalizedConfig:
        """Get a configuration localized to ``language`` (default language if None).

        Raises:
            MultilingualUnavailableError: The cache capability is off.
            NotFoundError: The configuration or any servable translation is missing.
        """
        self._require_multilingual()
        return self._localize(self._require_config(config_id), language)

    def get_config_view(self, config_id: int) -> LocalizedConfig:
        """Get a configuration without translated content."""
        return self.merge(self._require_config(config_id), None, None)

    def find_domain(self, value: str) -> Domain:
        """Match a URL or host against known domains.

        The exact host is tried first, then its root domain.

        Raises:
            NotFoundError: Neither candidate is registered.
        """
        candidates = candidate_domains(value)
        for candidate in candidates:
            record = self.config_store.find_domain(candidate)
            if record is not None:
                logger.info(
                    "domain_matched",
                    input_domain=value,
                    matched_domain=record.domain,
                    root_match=candidate != candidates[0],
                )
                return record

        logger.info("domain_not_found", input_domain=value, candidates=candidates)
        raise NotFoundError(
            f"Domain {value} not found",
            code="DOMAIN_NOT_FOUND",
            details={"domain": value},
        )

    def get_config_by_domain(
        self, domain: str, language: Optional[str] = None
    ) -> DomainConfig:
        """Get the localized configuration bound to a domain.

        Raises:
            MultilingualUnavailableError: The cache capability is off.
            NotFoundError: Unknown domain, configuration or translation.
        """
        self._require_multilingual()
        record = self.find_domain(domain)
        config = self._require_config(record.config_id)
        return DomainConfig(domain=record, config=self._localize(config, language))

    def get_domain_view(self, domain: str) -> DomainConfig:
        """Get the configuration bound to a domain without translated content."""
        record = self.find_domain(domain)
        return DomainConfig(domain=record, config=self.get_config_view(record.config_id))

    def list_configs(self, language: Optional[str] = None) -> List[LocalizedConfig]:
        """List localized configurations; those with no servable translation are skipped.

        Raises:
            MultilingualUnavailableError: The cache capability is off.
        """
        self._require_multilingual()
        results = []
        for config in self.config_store.list_configs():
            try:
                results.append(self._localize(config, language))
            except NotFoundError:
                logger.debug("config_without_translation_skipped", config_id=config.id)
        return results

    def list_config_views(self) -> List[LocalizedConfig]:
        """List all configurations without translated content."""
        return [self.merge(config, None, None) for config in self.config_store.list_configs()]

    def create_config(
        self,
        links: Optional[Dict[str, Any]] = None,
        permissions: Optional[Dict[str, Any]] = None,
    ) -> Configuration:
        links = {} if links is None else links
        permissions = {} if permissions is None else permissions
        _require_mapping("links", links)
        _require_mapping("permissions", permissions)

        config = self.config_store.create_config(links, permissions)
        logger.info("config_created", config_id=config.id)
        return config

    def update_config(
        self,
        config_id: int,
        links: Optional[Dict[str, Any]] = None,
        permissions: Optional[Dict[str, Any]] = None,
    ) -> Configuration:
        """Replace the supplied language-independent fields of a configuration.

        Raises:
            NotFoundError: The configuration does not exist.
            ValidationError: A supplied field is not a mapping.
        """
        changes: Dict[str, Any] = {}
        if links is not None:
            _require_mapping("links", links)
            changes["links"] = links
        if permissions is not None:
            _require_mapping("permissions", permissions)
            changes["permissions"] = permissions

        config = self.config_store.update_config(config_id, changes)
        if config is None:
            raise _config_not_found(config_id)

        logger.info("config_updated", config_id=config_id, fields=sorted(changes))
        return config

    def delete_config(self, config_id: int) -> None:
        """Delete a configuration, its translations and every cached language.

        Raises:
            NotFoundError: The configuration does not exist.
            ConflictError: Domains still reference the configuration.
        """
        self._require_config(config_id)

        domain_count = self.config_store.count_domains_for_config(config_id)
        if domain_count > 0:
            raise ConflictError(
                f"Configuration {config_id} is used by {domain_count} domain(s)",
                code="CONFIG_IN_USE",
                details={"config_id": config_id, "domain_count": domain_count},
            )

        if self.config_store.delete_config(config_id) == 0:
            raise _config_not_found(config_id)

        self.translation_service.invalidate_all_caches_for_config(config_id)
        logger.info("config_deleted", config_id=config_id)

    def create_domain(
        self, domain: str, config_id: int, homepage: Optional[str] = None
    ) -> Domain:
        """Bind a host name to a configuration.

        Raises:
            ValidationError: The domain is empty after normalization.
            ConflictError: The domain is already registered.
            NotFoundError: The configuration does not exist.
        """
        host = extract_domain(domain)
        if not host:
            raise ValidationError(
                "Domain must not be empty",
                details={"field": "domain"},
            )

        if self.config_store.find_domain(host) is not None:
            raise ConflictError(
                f"Domain {host} already exists",
                code="DOMAIN_ALREADY_EXISTS",
                details={"domain": host},
            )
        self._require_config(config_id)

        try:
            record = self.config_store.create_domain(
                Domain(domain=host, config_id=config_id, homepage=homepage)
            )
        except UniqueConstraintError as e:
            raise ConflictError(
                f"Domain {host} already exists",
                code="DOMAIN_ALREADY_EXISTS",
                details={"domain": host},
            ) from e
        except ForeignKeyConstraintError as e:
            raise _config_not_found(config_id) from e

        logger.info("domain_created", domain=host, config_id=config_id)
        return record
