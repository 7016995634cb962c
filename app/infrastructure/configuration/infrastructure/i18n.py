"""Translation engine infrastructure settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_LANGUAGE: Preferred language of the user, queried when a missing
            dictionary is fetched (default: unset, falls back to the baseline)
        I18N_BASELINE_LOCALE: Locale fetched when no preference is set (default: en)
        I18N_TRANSLATIONS_DIR: Directory holding ``*.<locale>.yml`` dictionaries
        I18N_TRANSLATIONS_URL: Base URL serving ``GET /<locale>`` JSON dictionaries
        I18N_HTTP_TIMEOUT_SECONDS: Timeout for remote dictionary fetches (default: 10s)

    Example:
        ```python
        from infrastructure.configuration import settings

        language = settings.i18n.LANGUAGE or settings.i18n.BASELINE_LOCALE
        ```
    """

    LANGUAGE: Optional[str] = Field(default=None, alias="I18N_LANGUAGE")
    BASELINE_LOCALE: str = Field(default="en", alias="I18N_BASELINE_LOCALE")
    TRANSLATIONS_DIR: Optional[str] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    TRANSLATIONS_URL: Optional[str] = Field(
        default=None, alias="I18N_TRANSLATIONS_URL"
    )
    HTTP_TIMEOUT_SECONDS: float = Field(
        default=10.0, alias="I18N_HTTP_TIMEOUT_SECONDS"
    )
