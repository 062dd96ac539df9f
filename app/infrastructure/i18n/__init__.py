"""i18n system - language negotiation for multilingual content.

Main components:
- models: normalize_language_code, LanguagePreference
- resolvers: LanguageResolver for explicit parameter / header / default resolution
- factory: create_language_resolver from application settings
"""

from infrastructure.i18n.factory import create_language_resolver
from infrastructure.i18n.models import LanguagePreference, normalize_language_code
from infrastructure.i18n.resolvers import LanguageResolver

__all__ = [
    "LanguagePreference",
    "normalize_language_code",
    "LanguageResolver",
    "create_language_resolver",
]
