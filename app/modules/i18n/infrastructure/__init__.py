"""Infrastructure layer - binding of the locale repository to HTTP routing."""

from modules.i18n.infrastructure.navigation import RedirectNavigator
from modules.i18n.infrastructure.repository import RoutingLocaleRepository
from modules.i18n.infrastructure.routing import (
    locale_from_pathname,
    replace_locale_segment,
)

__all__ = [
    "RedirectNavigator",
    "RoutingLocaleRepository",
    "locale_from_pathname",
    "replace_locale_segment",
]
