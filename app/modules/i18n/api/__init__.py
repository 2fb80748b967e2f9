"""API layer - presentation adapter, translator and HTTP routes."""

from modules.i18n.api.switcher import LocaleSwitcher, build_locale_switcher
from modules.i18n.api.translator import Translator

__all__ = ["LocaleSwitcher", "build_locale_switcher", "Translator"]
