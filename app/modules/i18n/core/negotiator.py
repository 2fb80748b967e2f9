"""Request-time locale negotiation.

Runs once per incoming request: picks the effective locale from the routing
layer's candidate and loads its message catalog. The rendering layer always
receives a valid locale and a complete catalog, never an absent one.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from infrastructure.i18n import MessageCatalog, MessageLoader
from infrastructure.logging import get_module_logger
from modules.i18n.domain.errors import CatalogLoadError
from modules.i18n.domain.models import (
    DEFAULT_LOCALE,
    LocaleCode,
    is_supported_locale,
)

logger = get_module_logger()


@dataclass
class RequestLocaleContext:
    """Locale state owned by a single request.

    Attributes:
        locale: Resolved locale code, always a catalog member.
        messages: This request's own copy of the locale's messages.
    """

    locale: LocaleCode
    messages: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"locale": self.locale.value, "messages": self.messages}


class RequestLocaleNegotiator:
    """Resolves the locale of a request and loads its messages.

    Attributes:
        loader: Message catalog loader collaborator.
        default_locale: Locale used for absent or unsupported candidates.
    """

    def __init__(
        self,
        loader: MessageLoader,
        default_locale: LocaleCode = DEFAULT_LOCALE,
    ):
        self.loader = loader
        self.default_locale = default_locale

    def resolve_locale(self, candidate: Optional[Any]) -> LocaleCode:
        """Map the routing candidate onto a catalog code.

        Args:
            candidate: Locale segment captured by the router, possibly None.

        Returns:
            The candidate when it is a catalog code, otherwise the default.
        """
        if candidate and is_supported_locale(candidate):
            return LocaleCode(candidate)

        logger.debug(
            "locale_fallback_applied",
            candidate=None if candidate is None else str(candidate),
            locale=self.default_locale.value,
        )
        return self.default_locale

    def negotiate(self, candidate: Optional[Any]) -> RequestLocaleContext:
        """Build the request-scoped locale context.

        Args:
            candidate: Locale segment captured by the router, possibly None.

        Returns:
            RequestLocaleContext for the resolved locale.

        Raises:
            CatalogLoadError: If the resolved locale's catalog cannot be
                loaded. Fatal for the request.
        """
        locale = self.resolve_locale(candidate)

        try:
            catalog = self.loader.load(locale.value)
        except (FileNotFoundError, ValueError) as e:
            logger.error("catalog_load_failed", locale=locale.value, error=str(e))
            raise CatalogLoadError(locale.value, str(e)) from e

        return RequestLocaleContext(
            locale=locale,
            messages=copy.deepcopy(catalog.messages),
        )


def find_missing_keys(catalogs: Dict[Any, MessageCatalog]) -> Dict[str, list]:
    """Compare message key sets across locales.

    Args:
        catalogs: Loaded catalogs by locale code.

    Returns:
        For every locale lacking keys that another locale defines, the sorted
        list of those keys. Empty when all key sets match.
    """
    key_sets = {str(code): catalog.keys() for code, catalog in catalogs.items()}
    all_keys: set = set().union(*key_sets.values()) if key_sets else set()
    return {
        code: sorted(all_keys - keys)
        for code, keys in key_sets.items()
        if all_keys - keys
    }


def check_catalog_parity(
    loader: MessageLoader, locales: Iterable[LocaleCode]
) -> Dict[str, list]:
    """Load every locale and log keys missing from some of them.

    Mismatches are reported, never raised.

    Returns:
        The result of find_missing_keys().
    """
    catalogs = {code.value: loader.load(code.value) for code in locales}
    missing = find_missing_keys(catalogs)
    for code, keys in missing.items():
        logger.warning("translation_keys_missing", locale=code, keys=keys)
    if not missing:
        logger.info("translation_keys_consistent", locales=sorted(catalogs))
    return missing
