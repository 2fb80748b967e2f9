"""LocaleRepository bound to a request's routing context."""

from typing import Any, Mapping

from infrastructure.logging import get_module_logger
from modules.i18n.domain.models import DEFAULT_LOCALE, LocaleCode, is_supported_locale
from modules.i18n.domain.repository import LocaleRepository, Navigator
from modules.i18n.infrastructure.routing import replace_locale_segment

logger = get_module_logger()


class RoutingLocaleRepository(LocaleRepository):
    """Reads the locale from route parameters and navigates by path rewrite.

    A value object: build a fresh instance from each request's path
    parameters, pathname and navigator instead of sharing one.

    Attributes:
        params: Route parameters; the locale lives under ``param_name``.
        pathname: Path of the current request, without query string.
        navigator: Host navigation primitive used by set_locale().
    """

    def __init__(
        self,
        params: Mapping[str, Any],
        pathname: str,
        navigator: Navigator,
        param_name: str = "locale",
    ):
        self.params = params
        self.pathname = pathname
        self.navigator = navigator
        self.param_name = param_name

    def get_current_locale(self) -> LocaleCode:
        locale = self.params.get(self.param_name)
        return LocaleCode(locale) if self.is_valid_locale(locale) else DEFAULT_LOCALE

    def set_locale(self, locale: LocaleCode) -> None:
        # The segment to rewrite is the raw one in the URL; after a fallback it
        # differs from the current locale.
        raw_segment = self.params.get(self.param_name)
        current = str(raw_segment) if raw_segment else self.get_current_locale().value
        target = replace_locale_segment(self.pathname, current, str(locale))

        logger.debug(
            "locale_navigation",
            from_path=self.pathname,
            to_path=target,
        )
        self.navigator.replace(target)

    def is_valid_locale(self, candidate: Any) -> bool:
        return is_supported_locale(candidate)
