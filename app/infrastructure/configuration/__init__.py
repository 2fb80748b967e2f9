"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the locale
router using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nFeatureSettings: Locale routing settings class
    ServerSettings: HTTP server settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    locales_dir = settings.i18n.LOCALES_DIR
    detection = settings.i18n.LOCALE_DETECTION

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.i18n import I18nFeatureSettings
from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = ["Settings", "I18nFeatureSettings", "ServerSettings"]
