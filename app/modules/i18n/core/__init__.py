"""Core layer - use cases and request-time negotiation."""

from modules.i18n.core.negotiator import (
    RequestLocaleContext,
    RequestLocaleNegotiator,
    check_catalog_parity,
    find_missing_keys,
)
from modules.i18n.core.use_cases import GetCurrentLocaleUseCase, SwitchLocaleUseCase

__all__ = [
    "RequestLocaleContext",
    "RequestLocaleNegotiator",
    "check_catalog_parity",
    "find_missing_keys",
    "GetCurrentLocaleUseCase",
    "SwitchLocaleUseCase",
]
