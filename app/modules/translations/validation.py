"""Validation rules for translation content.

All rules run before any store access and raise ``ValidationError`` with the
offending field(s) in ``details``.
"""

from typing import Any, Dict, List

from infrastructure.errors import ValidationError
from modules.translations.models import TRANSLATABLE_FIELDS

TITLE_MAX_LENGTH = 200
AUTHOR_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000

FIELD_MAX_LENGTHS = {
    "title": TITLE_MAX_LENGTH,
    "author": AUTHOR_MAX_LENGTH,
    "description": DESCRIPTION_MAX_LENGTH,
}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def validate_required_fields(fields: Dict[str, Any]) -> None:
    """Check that every translatable field is present and non-empty.

    Raises:
        ValidationError: With ``missing_fields`` listing the offenders.
    """
    missing = [name for name in TRANSLATABLE_FIELDS if _is_blank(fields.get(name))]
    if missing:
        raise ValidationError(
            "Required fields are missing or empty",
            details={"missing_fields": missing},
        )


def validate_text_field(name: str, value: Any) -> None:
    """Check type and length of a text field.

    Raises:
        ValidationError: If the value is not a string or exceeds its cap.
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"Field {name} must be a string",
            details={"field": name},
        )

    max_length = FIELD_MAX_LENGTHS[name]
    if len(value) > max_length:
        raise ValidationError(
            f"Field {name} exceeds maximum length of {max_length} characters",
            details={
                "field": name,
                "max_length": max_length,
                "actual_length": len(value),
            },
        )


def validate_keywords(keywords: Any) -> None:
    """Check that keywords is a list of strings.

    Raises:
        ValidationError: If keywords is not a list, or an element is not a string.
    """
    if not isinstance(keywords, list):
        raise ValidationError(
            "Keywords must be an array",
            details={"field": "keywords"},
        )

    for index, keyword in enumerate(keywords):
        if not isinstance(keyword, str):
            raise ValidationError(
                "All keywords must be strings",
                details={"field": "keywords", "index": index},
            )


def validate_new_translation(fields: Dict[str, Any]) -> None:
    """Validate the content of a translation being created."""
    validate_required_fields(fields)
    for name in FIELD_MAX_LENGTHS:
        validate_text_field(name, fields[name])
    validate_keywords(fields["keywords"])


def validate_translation_changes(fields: Dict[str, Any]) -> None:
    """Validate a partial update; only the supplied fields are checked.

    Raises:
        ValidationError: On unknown field names, blank values, or any
            type/length violation of a supplied field.
    """
    unknown: List[str] = sorted(set(fields) - set(TRANSLATABLE_FIELDS))
    if unknown:
        raise ValidationError(
            "Unknown translation fields",
            details={"unknown_fields": unknown},
        )

    blank = [name for name in TRANSLATABLE_FIELDS if name in fields and _is_blank(fields[name])]
    if blank:
        raise ValidationError(
            "Fields cannot be empty",
            details={"empty_fields": blank},
        )

    for name in FIELD_MAX_LENGTHS:
        if name in fields:
            validate_text_field(name, fields[name])
    if "keywords" in fields:
        validate_keywords(fields["keywords"])
