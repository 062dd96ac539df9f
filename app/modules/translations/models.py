"""Translation models.

``Translation`` is the service-level shape of one language variant of a
configuration's human-readable content. ``TranslationRecord`` is the shape
exchanged with the store, where keywords are persisted as text; the
``encode_keywords`` / ``decode_keywords`` pair converts between the two at
the service boundary.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

TRANSLATABLE_FIELDS = ("title", "author", "description", "keywords")


def encode_keywords(keywords: List[str]) -> str:
    """Encode a keyword list to its stored text form (a JSON array)."""
    return json.dumps(list(keywords), ensure_ascii=False)


def decode_keywords(raw: Optional[str]) -> List[str]:
    """Decode stored keyword text back to a list.

    Empty, malformed or non-array text decodes to an empty list; non-string
    elements are dropped.
    """
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except ValueError:
        return []
    if not isinstance(parsed, list):
        return []
    return [item for item in parsed if isinstance(item, str)]


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class TranslationRecord:
    """Stored form of a translation (keywords as text)."""

    config_id: int
    language_code: str
    title: str
    author: str
    description: str
    keywords: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Translation:
    """One language variant of a configuration's translatable fields.

    Attributes:
        config_id: Owning configuration identifier.
        language_code: Normalized language code (e.g. "en-us").
        title: Title, at most 200 characters.
        author: Author, at most 100 characters.
        description: Description, at most 1000 characters.
        keywords: Ordered keyword list.
        id: Store-assigned identifier.
        created_at: Store-assigned creation timestamp.
        updated_at: Store-assigned update timestamp.
    """

    config_id: int
    language_code: str
    title: str
    author: str
    description: str
    keywords: List[str] = field(default_factory=list)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible representation (used as the cached value)."""
        return {
            "id": self.id,
            "config_id": self.config_id,
            "language_code": self.language_code,
            "title": self.title,
            "author": self.author,
            "description": self.description,
            "keywords": list(self.keywords),
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Translation":
        """Rebuild a Translation from ``to_dict`` output."""
        return cls(
            id=data.get("id"),
            config_id=data["config_id"],
            language_code=data["language_code"],
            title=data["title"],
            author=data["author"],
            description=data["description"],
            keywords=list(data.get("keywords") or []),
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
        )

    @classmethod
    def from_record(cls, record: TranslationRecord) -> "Translation":
        """Build a Translation from a stored record, decoding keywords."""
        return cls(
            id=record.id,
            config_id=record.config_id,
            language_code=record.language_code,
            title=record.title,
            author=record.author,
            description=record.description,
            keywords=decode_keywords(record.keywords),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def to_record(self) -> TranslationRecord:
        """Build the stored record for this translation, encoding keywords."""
        return TranslationRecord(
            id=self.id,
            config_id=self.config_id,
            language_code=self.language_code,
            title=self.title,
            author=self.author,
            description=self.description,
            keywords=encode_keywords(self.keywords),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(frozen=True)
class TranslatedContent:
    """Result of a fallback-aware read.

    Attributes:
        translation: The translation served.
        actual_language: Language of the translation served; differs from the
            requested language when fallback occurred.
    """

    translation: Translation
    actual_language: str
