"""Abstract interfaces the use cases depend on."""

from abc import ABC, abstractmethod
from typing import Any

from modules.i18n.domain.models import LocaleCode


class LocaleRepository(ABC):
    """Reads the current locale and navigates to another one.

    Implementations are bound to one routing context (path parameters,
    pathname and a navigator) and are rebuilt for every request.
    """

    @abstractmethod
    def get_current_locale(self) -> LocaleCode:
        """Return the locale of the current routing context.

        Never fails: an absent or unsupported value yields the default locale.
        """

    @abstractmethod
    def set_locale(self, locale: LocaleCode) -> None:
        """Navigate to the current page in ``locale``.

        Performs no validation; callers go through SwitchLocaleUseCase.
        """

    @abstractmethod
    def is_valid_locale(self, candidate: Any) -> bool:
        """Check whether ``candidate`` is a supported locale code."""


class Navigator(ABC):
    """Host navigation primitive."""

    @abstractmethod
    def replace(self, pathname: str) -> None:
        """Replace the current location with ``pathname`` (no new history entry)."""
