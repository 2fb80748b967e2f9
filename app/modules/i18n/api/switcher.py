"""Presentation adapter exposing locale state to the rendering layer."""

from typing import Any, Mapping, Tuple

from modules.i18n.core.use_cases import GetCurrentLocaleUseCase, SwitchLocaleUseCase
from modules.i18n.domain.models import Locale, LocaleCode, list_supported_locales
from modules.i18n.domain.repository import LocaleRepository, Navigator
from modules.i18n.infrastructure.repository import RoutingLocaleRepository


class LocaleSwitcher:
    """Current locale, the locale list and a bound switch function.

    Holds no routing state of its own: everything goes through the repository
    it was built with, so a switcher built for one request can never observe
    another request's path.
    """

    def __init__(self, repository: LocaleRepository):
        self.repository = repository
        self._get_current_locale = GetCurrentLocaleUseCase(repository)
        self._switch_locale = SwitchLocaleUseCase(repository)

    @property
    def current_locale(self) -> LocaleCode:
        return self._get_current_locale.execute()

    @property
    def locales(self) -> Tuple[Locale, ...]:
        return list_supported_locales()

    def switch_locale(self, locale: Any) -> None:
        """Switch to ``locale``; raises InvalidLocaleError for unknown codes."""
        self._switch_locale.execute(locale)


def build_locale_switcher(
    params: Mapping[str, Any], pathname: str, navigator: Navigator
) -> LocaleSwitcher:
    """Bind a new switcher to one routing context.

    Call this for every request; switchers are never cached.
    """
    return LocaleSwitcher(RoutingLocaleRepository(params, pathname, navigator))
