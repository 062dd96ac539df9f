"""Language models for the i18n system.

Defines the value types used during language negotiation.
"""

from dataclasses import dataclass


def normalize_language_code(code: str) -> str:
    """Normalize a language code to lower-case, hyphen-separated form.

    Examples: ``zh_CN`` -> ``zh-cn``, ``EN-US`` -> ``en-us``.

    The transform is idempotent and never fails.

    Args:
        code: Raw language code.

    Returns:
        Normalized language code.
    """
    return code.lower().replace("_", "-")


@dataclass(frozen=True)
class LanguagePreference:
    """One entry of a parsed language preference header.

    Attributes:
        code: Normalized language code (e.g. "zh-cn").
        quality: Preference weight from the ``q=`` parameter (default 1.0).
        position: Zero-based position in the header, used to break ties.
    """

    code: str
    quality: float = 1.0
    position: int = 0
