"""Domain layer - locale catalog, errors and repository interfaces."""

from modules.i18n.domain.models import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Locale,
    LocaleCode,
    TextDirection,
    get_locale,
    is_supported_locale,
    list_supported_locales,
)
from modules.i18n.domain.errors import CatalogLoadError, InvalidLocaleError
from modules.i18n.domain.repository import LocaleRepository, Navigator

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "Locale",
    "LocaleCode",
    "TextDirection",
    "get_locale",
    "is_supported_locale",
    "list_supported_locales",
    "CatalogLoadError",
    "InvalidLocaleError",
    "LocaleRepository",
    "Navigator",
]
