"""Configuration and domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from modules.translations.models import Translation


@dataclass
class Configuration:
    """Language-independent site metadata.

    Attributes:
        id: Store-assigned identifier.
        links: Arbitrary mapping of named links.
        permissions: Arbitrary mapping of permission flags.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: Optional[int] = None
    links: Dict[str, Any] = field(default_factory=dict)
    permissions: Dict[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Domain:
    """A host name bound to one configuration."""

    domain: str
    config_id: int
    homepage: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class LocalizedConfig:
    """A configuration merged with the translation served for a request.

    ``translation`` and ``language`` are None for the language-free view
    returned when multilingual reads are unavailable.
    """

    config: Configuration
    translation: Optional[Translation] = None
    language: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.config.id,
            "links": dict(self.config.links),
            "permissions": dict(self.config.permissions),
            "language": self.language,
            "title": None,
            "author": None,
            "description": None,
            "keywords": [],
            "created_at": self.config.created_at,
            "updated_at": self.config.updated_at,
        }
        if self.translation is not None:
            data.update(
                title=self.translation.title,
                author=self.translation.author,
                description=self.translation.description,
                keywords=list(self.translation.keywords),
            )
        return data


@dataclass
class DomainConfig:
    """A matched domain together with the configuration it is bound to."""

    domain: Domain
    config: LocalizedConfig

    def to_dict(self) -> Dict[str, Any]:
        return {
            "domain": self.domain.domain,
            "homepage": self.domain.homepage,
            "config": self.config.to_dict(),
        }
