"""Locale routing feature settings."""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class I18nFeatureSettings(FeatureSettings):
    """Configuration for locale routing and message catalogs.

    The supported locale list and the default locale are part of the domain
    catalog, not configuration. These settings only control where message
    resources live and how the root path picks a locale.

    Environment Variables:
        LOCALES_DIR: Directory holding ``<domain>.<locale>.yml`` message files
            (default: the ``locales`` directory shipped with the app)
        LOCALE_DETECTION: Honour the Accept-Language header when redirecting
            "/" to a localized path (default: true)
        LOCALE_COOKIE: Cookie used to remember the last rendered locale
            (default: NEXT_LOCALE)
        MESSAGES_CACHE: Keep parsed message catalogs in memory (default: true)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        loader = YAMLMessageLoader(
            settings.i18n.LOCALES_DIR,
            use_cache=settings.i18n.MESSAGES_CACHE,
        )
        ```
    """

    LOCALES_DIR: Optional[Path] = Field(
        default=None, alias="LOCALES_DIR", validate_default=True
    )
    LOCALE_DETECTION: bool = Field(default=True, alias="LOCALE_DETECTION")
    LOCALE_COOKIE: str = Field(default="NEXT_LOCALE", alias="LOCALE_COOKIE")
    MESSAGES_CACHE: bool = Field(default=True, alias="MESSAGES_CACHE")

    @field_validator("LOCALES_DIR", mode="before")
    @classmethod
    def _default_locales_dir(cls, v: Optional[Any]) -> Any:
        """Fall back to the bundled locales directory when unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            # this file is at .../app/infrastructure/configuration/features/i18n.py
            return Path(__file__).resolve().parents[3] / "locales"
        return v
