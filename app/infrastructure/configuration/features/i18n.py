"""Multilingual content feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings

BUILTIN_DEFAULT_LANGUAGE = "zh-cn"
BUILTIN_SUPPORTED_LANGUAGES = "zh-cn,en-us,ja-jp"


class I18nSettings(FeatureSettings):
    """Language negotiation configuration.

    Both values are free text; they are trimmed and normalized by the
    language resolver factory. A blank value falls back to the built-in
    default.

    Environment Variables:
        DEFAULT_LANGUAGE: Default language code (default: zh-cn)
        SUPPORTED_LANGUAGES: Comma-separated language codes (default: zh-cn,en-us,ja-jp)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        default = settings.i18n.default_language
        supported = settings.i18n.supported_languages
        ```
    """

    DEFAULT_LANGUAGE: str = Field(
        default=BUILTIN_DEFAULT_LANGUAGE, alias="DEFAULT_LANGUAGE"
    )
    SUPPORTED_LANGUAGES: str = Field(
        default=BUILTIN_SUPPORTED_LANGUAGES, alias="SUPPORTED_LANGUAGES"
    )

    @property
    def default_language(self) -> str:
        """Trimmed default language, or the built-in default when blank."""
        value = self.DEFAULT_LANGUAGE.strip()
        return value or BUILTIN_DEFAULT_LANGUAGE

    @property
    def supported_languages(self) -> list[str]:
        """Trimmed, non-empty supported language entries."""
        entries = [part.strip() for part in self.SUPPORTED_LANGUAGES.split(",")]
        entries = [entry for entry in entries if entry]
        if not entries:
            entries = BUILTIN_SUPPORTED_LANGUAGES.split(",")
        return entries
