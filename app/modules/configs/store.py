"""Configuration and domain storage."""

import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Protocol

from infrastructure.logging import get_module_logger
from modules.configs.models import Configuration, Domain
from modules.translations.store import ForeignKeyConstraintError, UniqueConstraintError

logger = get_module_logger()


class ConfigStore(Protocol):
    """Storage interface for configurations and their domains.

    Deleting a configuration cascades to its translations.
    """

    def find_config(self, config_id: int) -> Optional[Configuration]: ...

    def list_configs(self) -> List[Configuration]: ...

    def create_config(
        self, links: Dict[str, Any], permissions: Dict[str, Any]
    ) -> Configuration: ...

    def update_config(
        self, config_id: int, fields: Dict[str, Any]
    ) -> Optional[Configuration]: ...

    def delete_config(self, config_id: int) -> int: ...

    def find_domain(self, domain: str) -> Optional[Domain]: ...

    def create_domain(self, domain: Domain) -> Domain: ...

    def count_domains_for_config(self, config_id: int) -> int: ...


class InMemoryConfigStore:
    """In-memory implementation of ConfigStore.

    Cascades are wired with ``add_delete_hook``; each hook receives the id of
    a configuration as it is deleted.
    """

    def __init__(self) -> None:
        self._configs: Dict[int, Configuration] = {}
        self._domains: Dict[str, Domain] = {}
        self._lock = threading.RLock()
        self._next_config_id = 1
        self._next_domain_id = 1
        self._delete_hooks: List[Callable[[int], Any]] = []

    def add_delete_hook(self, hook: Callable[[int], Any]) -> None:
        self._delete_hooks.append(hook)

    def config_exists(self, config_id: int) -> bool:
        with self._lock:
            return config_id in self._configs

    def find_config(self, config_id: int) -> Optional[Configuration]:
        with self._lock:
            config = self._configs.get(config_id)
            return replace(config) if config else None

    def list_configs(self) -> List[Configuration]:
        with self._lock:
            return [replace(self._configs[key]) for key in sorted(self._configs)]

    def create_config(
        self, links: Dict[str, Any], permissions: Dict[str, Any]
    ) -> Configuration:
        with self._lock:
            now = datetime.now(timezone.utc)
            config = Configuration(
                id=self._next_config_id,
                links=dict(links),
                permissions=dict(permissions),
                created_at=now,
                updated_at=now,
            )
            self._next_config_id += 1
            self._configs[config.id] = config
            return replace(config)

    def update_config(
        self, config_id: int, fields: Dict[str, Any]
    ) -> Optional[Configuration]:
        with self._lock:
            config = self._configs.get(config_id)
            if config is None:
                return None
            updated = replace(config, **fields, updated_at=datetime.now(timezone.utc))
            self._configs[config_id] = updated
            return replace(updated)

    def delete_config(self, config_id: int) -> int:
        """Remove a configuration, then run the cascade hooks.

        Hooks run after the lock is released: a hook may take its own store
        lock, and that store calls ``config_exists`` while holding it.
        """
        with self._lock:
            if self._configs.pop(config_id, None) is None:
                return 0
        for hook in self._delete_hooks:
            hook(config_id)
        logger.debug("config_record_deleted", config_id=config_id)
        return 1

    def find_domain(self, domain: str) -> Optional[Domain]:
        with self._lock:
            record = self._domains.get(domain)
            return replace(record) if record else None

    def create_domain(self, domain: Domain) -> Domain:
        with self._lock:
            if domain.config_id not in self._configs:
                raise ForeignKeyConstraintError(
                    f"config {domain.config_id} does not exist"
                )
            if domain.domain in self._domains:
                raise UniqueConstraintError(f"duplicate domain {domain.domain}")

            now = datetime.now(timezone.utc)
            stored = replace(
                domain, id=self._next_domain_id, created_at=now, updated_at=now
            )
            self._next_domain_id += 1
            self._domains[stored.domain] = stored
            return replace(stored)

    def count_domains_for_config(self, config_id: int) -> int:
        with self._lock:
            return sum(1 for d in self._domains.values() if d.config_id == config_id)
