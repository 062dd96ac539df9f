"""Request and response schemas for configuration and domain endpoints."""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ConfigCreateRequest(BaseModel):
    """Schema for creating a configuration."""

    links: Annotated[
        Dict[str, Any],
        Field(
            default_factory=dict,
            description="Named links",
            json_schema_extra={"example": {"home": "https://example.com"}},
        ),
    ]
    permissions: Annotated[
        Dict[str, Any],
        Field(
            default_factory=dict,
            description="Permission flags",
            json_schema_extra={"example": {"public": True}},
        ),
    ]


class ConfigUpdateRequest(BaseModel):
    """Schema for updating a configuration; omitted fields are unchanged."""

    links: Optional[Dict[str, Any]] = None
    permissions: Optional[Dict[str, Any]] = None


class ConfigResponse(BaseModel):
    """Schema for a stored configuration."""

    id: int
    links: Dict[str, Any]
    permissions: Dict[str, Any]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LocalizedConfigResponse(BaseModel):
    """Schema for a configuration merged with its localized content.

    Translated fields are null and `language` is null when multilingual
    content is unavailable.
    """

    id: int
    links: Dict[str, Any]
    permissions: Dict[str, Any]
    language: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DomainCreateRequest(BaseModel):
    """Schema for binding a domain to a configuration."""

    domain: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Host name or URL",
            json_schema_extra={"example": "example.com"},
        ),
    ]
    config_id: Annotated[int, Field(..., description="Configuration ID")]
    homepage: Annotated[
        Optional[str],
        Field(
            default=None,
            description="Homepage URL",
            json_schema_extra={"example": "https://example.com"},
        ),
    ] = None


class DomainResponse(BaseModel):
    """Schema for a stored domain."""

    id: int
    domain: str
    config_id: int
    homepage: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DomainConfigResponse(BaseModel):
    """Schema for a domain lookup: the matched domain plus its configuration."""

    domain: str
    homepage: Optional[str] = None
    config: LocalizedConfigResponse
