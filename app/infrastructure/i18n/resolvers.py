"""Language resolution for inbound requests.

Turns raw request signals (an explicit language parameter and an
Accept-Language style preference header) into exactly one normalized,
supported language code.
"""

import math
from typing import Iterable, List, Optional

import structlog
from infrastructure.i18n.models import LanguagePreference, normalize_language_code

logger = structlog.get_logger().bind(component="i18n.resolver")


class LanguageResolver:
    """Resolves the language to serve for a request.

    Resolution order:
    1. Explicit request parameter (if supported)
    2. Preference header (highest-quality supported entry)
    3. Default language

    The explicit parameter always outranks the header, whatever the header's
    quality values are. The resolver never raises: unsupported or malformed
    input degrades to "no match" at each stage.

    Both the default language and the supported set are normalized once at
    construction. The default language is always part of the supported set.
    """

    def __init__(self, default_language: str, supported_languages: Iterable[str]):
        """Initialize language resolver.

        Args:
            default_language: Fallback language code.
            supported_languages: Language codes the service can serve.
        """
        self._default_language = normalize_language_code(default_language)

        ordered: List[str] = []
        for language in supported_languages:
            normalized = normalize_language_code(language)
            if normalized and normalized not in ordered:
                ordered.append(normalized)
        if self._default_language not in ordered:
            ordered.insert(0, self._default_language)

        self._supported_order = tuple(ordered)
        self._supported = frozenset(ordered)
        self.log = logger.bind(default_language=self._default_language)

    @staticmethod
    def normalize(code: str) -> str:
        """Normalize a language code (lower-case, underscores to hyphens)."""
        return normalize_language_code(code)

    def is_supported(self, code: str) -> bool:
        """Check whether a language code is supported after normalization."""
        return normalize_language_code(code) in self._supported

    def get_default_language(self) -> str:
        """Return the normalized default language code."""
        return self._default_language

    def get_supported_languages(self) -> List[str]:
        """Return the supported language codes in configuration order."""
        return list(self._supported_order)

    def parse_preferences(self, header: Optional[str]) -> List[LanguagePreference]:
        """Parse a preference header into entries sorted by quality.

        Parses "fr-FR;q=0.9,zh-CN;q=0.8" into preferences sorted by quality
        descending. The sort is stable, so the first-listed entry wins ties.
        A missing, unparsable or non-finite quality counts as 1.0.

        Args:
            header: Accept-Language header value.

        Returns:
            Parsed preferences, highest quality first.
        """
        if not header:
            return []

        preferences = []
        for position, part in enumerate(header.split(",")):
            params = part.split(";")
            code = params[0].strip()
            if not code:
                continue

            quality = 1.0
            for param in params[1:]:
                name, _, value = param.strip().partition("=")
                if name.strip().lower() != "q":
                    continue
                try:
                    parsed = float(value.strip())
                except ValueError:
                    parsed = 1.0
                quality = parsed if math.isfinite(parsed) else 1.0

            preferences.append(
                LanguagePreference(
                    code=normalize_language_code(code),
                    quality=quality,
                    position=position,
                )
            )

        return sorted(preferences, key=lambda p: p.quality, reverse=True)

    def parse_preference_header(self, header: Optional[str]) -> Optional[str]:
        """Return the highest-quality supported language in a header.

        Args:
            header: Accept-Language header value.

        Returns:
            Normalized supported language code, or None if no entry matches
            or the header is empty/malformed.
        """
        for preference in self.parse_preferences(header):
            if preference.code in self._supported:
                return preference.code
        return None

    def resolve(
        self,
        explicit: Optional[str] = None,
        preference_header: Optional[str] = None,
    ) -> str:
        """Resolve the language to serve.

        Args:
            explicit: Explicit language parameter (e.g. ``?lang=en-US``).
            preference_header: Accept-Language header value.

        Returns:
            Normalized, supported language code.
        """
        if explicit:
            normalized = normalize_language_code(explicit)
            if normalized in self._supported:
                return normalized
            self.log.debug("unsupported_explicit_language", language=normalized)

        from_header = self.parse_preference_header(preference_header)
        if from_header:
            return from_header

        return self._default_language
