"""Translation record storage.

The protocol describes what the translation service needs from the
persistence layer. Implementations report constraint violations with the
typed errors below, never raw driver errors.
"""

import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from infrastructure.logging import get_module_logger
from modules.translations.models import TranslationRecord

logger = get_module_logger()


class StoreConstraintError(Exception):
    """Base class for constraint violations reported by a store."""


class UniqueConstraintError(StoreConstraintError):
    """A record already exists for the (config_id, language_code) pair."""


class ForeignKeyConstraintError(StoreConstraintError):
    """The referenced configuration does not exist."""


class TranslationStore(Protocol):
    """Storage interface for translation records.

    Methods:
        find_translation: Return the record for a (config, language) pair
        create_translation: Persist a new record and return it with id/timestamps
        update_translation: Apply field changes to a record by id
        delete_translation: Delete the record for a pair, returning rows deleted
        count_translations: Count records for a configuration
        list_translations: All records for a configuration, by language ascending
    """

    def find_translation(
        self, config_id: int, language_code: str
    ) -> Optional[TranslationRecord]:
        """Return the record for the pair, or None."""
        ...

    def create_translation(self, record: TranslationRecord) -> TranslationRecord:
        """Persist a new record.

        Raises:
            UniqueConstraintError: If the pair already exists.
            ForeignKeyConstraintError: If the configuration does not exist.
        """
        ...

    def update_translation(
        self, translation_id: int, fields: Dict[str, Any]
    ) -> Optional[TranslationRecord]:
        """Apply field changes and return the updated record, or None if absent."""
        ...

    def delete_translation(self, config_id: int, language_code: str) -> int:
        """Delete the record for the pair and return the number of rows deleted."""
        ...

    def count_translations(self, config_id: int) -> int:
        """Count records for a configuration."""
        ...

    def list_translations(self, config_id: int) -> List[TranslationRecord]:
        """Return all records for a configuration ordered by language code."""
        ...


class InMemoryTranslationStore:
    """In-memory implementation of TranslationStore.

    Enforces the (config_id, language_code) uniqueness constraint and, when
    given a ``config_exists`` callable, the configuration foreign key.
    Suitable for single-instance deployments, development and tests.
    """

    def __init__(self, config_exists: Optional[Callable[[int], bool]] = None) -> None:
        """Initialize the in-memory store.

        Args:
            config_exists: Optional check used to enforce the configuration
                foreign key on create.
        """
        self._records: Dict[Tuple[int, str], TranslationRecord] = {}
        self._lock = threading.Lock()
        self._next_id = 1
        self._config_exists = config_exists

    def find_translation(
        self, config_id: int, language_code: str
    ) -> Optional[TranslationRecord]:
        with self._lock:
            record = self._records.get((config_id, language_code))
            return replace(record) if record else None

    def create_translation(self, record: TranslationRecord) -> TranslationRecord:
        """Insert a record; the foreign key check and the insert are atomic.

        ``config_exists`` is called with the store lock held, so it must not
        wait on anything that holds this lock.
        """
        with self._lock:
            if self._config_exists is not None and not self._config_exists(
                record.config_id
            ):
                raise ForeignKeyConstraintError(
                    f"config {record.config_id} does not exist"
                )

            key = (record.config_id, record.language_code)
            if key in self._records:
                raise UniqueConstraintError(
                    f"duplicate key (config_id, language_code)={key}"
                )

            now = datetime.now(timezone.utc)
            stored = replace(record, id=self._next_id, created_at=now, updated_at=now)
            self._next_id += 1
            self._records[key] = stored

            logger.debug(
                "translation_record_saved",
                translation_id=stored.id,
                config_id=stored.config_id,
                language_code=stored.language_code,
            )
            return replace(stored)

    def update_translation(
        self, translation_id: int, fields: Dict[str, Any]
    ) -> Optional[TranslationRecord]:
        with self._lock:
            for key, record in self._records.items():
                if record.id == translation_id:
                    updated = replace(
                        record, **fields, updated_at=datetime.now(timezone.utc)
                    )
                    self._records[key] = updated
                    return replace(updated)
        return None

    def delete_translation(self, config_id: int, language_code: str) -> int:
        with self._lock:
            removed = self._records.pop((config_id, language_code), None)
            return 1 if removed else 0

    def count_translations(self, config_id: int) -> int:
        with self._lock:
            return sum(1 for (cid, _) in self._records if cid == config_id)

    def list_translations(self, config_id: int) -> List[TranslationRecord]:
        with self._lock:
            records = [
                replace(record)
                for (cid, _), record in self._records.items()
                if cid == config_id
            ]
        return sorted(records, key=lambda r: r.language_code)

    def delete_all_for_config(self, config_id: int) -> int:
        """Cascade delete every record of a configuration.

        Args:
            config_id: Configuration being deleted.

        Returns:
            Number of records removed.
        """
        with self._lock:
            keys = [key for key in self._records if key[0] == config_id]
            for key in keys:
                del self._records[key]
        logger.debug("translation_records_cascaded", config_id=config_id, count=len(keys))
        return len(keys)
