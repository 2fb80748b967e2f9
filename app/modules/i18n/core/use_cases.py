"""Application-layer operations on the current locale."""

from typing import Any

from infrastructure.logging import get_module_logger
from modules.i18n.domain.errors import InvalidLocaleError
from modules.i18n.domain.models import LocaleCode
from modules.i18n.domain.repository import LocaleRepository

logger = get_module_logger()


class GetCurrentLocaleUseCase:
    """Returns the locale of the repository's routing context."""

    def __init__(self, locale_repository: LocaleRepository):
        self.locale_repository = locale_repository

    def execute(self) -> LocaleCode:
        return self.locale_repository.get_current_locale()


class SwitchLocaleUseCase:
    """Single entry point for "the user wants locale X".

    Only catalog codes ever reach the repository's navigation side effect.
    Switching to the current locale is not an error: it navigates to the
    same URL.
    """

    def __init__(self, locale_repository: LocaleRepository):
        self.locale_repository = locale_repository

    def execute(self, locale: Any) -> None:
        """Validate ``locale`` and navigate to it.

        Args:
            locale: Requested locale code.

        Raises:
            InvalidLocaleError: If the code is not in the locale catalog. No
                navigation happens in that case.
        """
        if not self.locale_repository.is_valid_locale(locale):
            logger.warning("locale_switch_rejected", requested_locale=str(locale))
            raise InvalidLocaleError(locale)

        target = LocaleCode(locale)
        self.locale_repository.set_locale(target)
        logger.info("locale_switched", locale=target.value)
