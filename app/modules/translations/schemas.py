"""Request and response schemas for the translation endpoints.

Content rules (lengths, non-empty values) are enforced by the service so
that API and programmatic callers get the same errors; the schemas only
describe shape and types.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TranslationCreateRequest(BaseModel):
    """Schema for creating a translation."""

    language_code: Annotated[
        str,
        Field(
            ...,
            description="Target language code",
            json_schema_extra={"example": "en-us"},
        ),
    ]
    title: Annotated[
        str,
        Field(..., description="Site title", json_schema_extra={"example": "Example"}),
    ]
    author: Annotated[
        str,
        Field(..., description="Site author", json_schema_extra={"example": "Jane"}),
    ]
    description: Annotated[
        str,
        Field(
            ...,
            description="Site description",
            json_schema_extra={"example": "An example site"},
        ),
    ]
    keywords: Annotated[
        List[str],
        Field(
            ...,
            description="Ordered keywords",
            json_schema_extra={"example": ["example", "demo"]},
        ),
    ]


class TranslationUpdateRequest(BaseModel):
    """Schema for a partial translation update; omitted fields are unchanged."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[List[str]] = None


class TranslationResponse(BaseModel):
    """Schema for a stored translation."""

    id: Optional[int] = None
    config_id: int
    language_code: str
    title: str
    author: str
    description: str
    keywords: List[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
