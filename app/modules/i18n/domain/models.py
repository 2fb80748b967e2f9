"""Locale catalog for the i18n module.

The catalog is the authoritative, ordered list of locales the site renders.
It is built once at import time from a static table and never mutated, so it
can be shared across concurrent requests without synchronization.

Key distinctions:
  - models.py: the static catalog (frozen dataclasses, no validation layer)
  - api/schemas.py: API contracts with Pydantic
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class LocaleCode(str, Enum):
    """Supported locale codes.

    Values double as URL path segments (``/en/...``, ``/th/...``) and as
    message resource identifiers.
    """

    EN = "en"
    TH = "th"

    def __str__(self) -> str:
        return self.value


class TextDirection(str, Enum):
    """Writing direction of a locale."""

    LTR = "ltr"
    RTL = "rtl"


@dataclass(frozen=True)
class Locale:
    """Catalog entry describing one supported locale.

    Attributes:
        code: Locale code, also the URL path segment.
        name: English display name (e.g. "Thai").
        native_name: Name in the locale's own language (e.g. "ไทย").
        flag: Flag glyph shown in locale pickers.
        direction: Text direction used for the rendered document.
    """

    code: LocaleCode
    name: str
    native_name: str
    flag: str
    direction: TextDirection = TextDirection.LTR


SUPPORTED_LOCALES: Tuple[Locale, ...] = (
    Locale(
        code=LocaleCode.EN,
        name="English",
        native_name="English",
        flag="🇺🇸",
        direction=TextDirection.LTR,
    ),
    Locale(
        code=LocaleCode.TH,
        name="Thai",
        native_name="ไทย",
        flag="🇹🇭",
        direction=TextDirection.LTR,
    ),
)

DEFAULT_LOCALE: LocaleCode = LocaleCode.EN

_SUPPORTED_CODES = frozenset(locale.code.value for locale in SUPPORTED_LOCALES)


def list_supported_locales() -> Tuple[Locale, ...]:
    """Return the supported locales in catalog order."""
    return SUPPORTED_LOCALES


def is_supported_locale(candidate: Any) -> bool:
    """Check whether ``candidate`` is exactly one of the catalog codes.

    Matching is case-sensitive string equality with no tag normalization:
    "en" is supported, "EN" and "en-US" are not.

    Args:
        candidate: Value to test, typically a URL path segment.

    Returns:
        True iff candidate equals a catalog code.
    """
    if isinstance(candidate, LocaleCode):
        return True
    return isinstance(candidate, str) and candidate in _SUPPORTED_CODES


def get_locale(code: LocaleCode) -> Locale:
    """Look up the catalog entry for a code.

    Raises:
        KeyError: If the code is not in the catalog.
    """
    for locale in SUPPORTED_LOCALES:
        if locale.code == code:
            return locale
    raise KeyError(code)
