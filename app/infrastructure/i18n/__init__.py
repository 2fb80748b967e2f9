"""i18n infrastructure - message catalogs and locale detection.

Main components:
- models: MessageCatalog
- loader: MessageLoader and YAMLMessageLoader
- resolvers: LocaleResolver and Accept-Language parsing
"""

from infrastructure.i18n.loader import MessageLoader, YAMLMessageLoader
from infrastructure.i18n.models import MessageCatalog
from infrastructure.i18n.resolvers import LocaleResolver, parse_accept_language

__all__ = [
    "MessageCatalog",
    "MessageLoader",
    "YAMLMessageLoader",
    "LocaleResolver",
    "parse_accept_language",
]
