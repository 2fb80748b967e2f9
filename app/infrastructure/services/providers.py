"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import MessageLoader, YAMLMessageLoader
from modules.i18n.domain.models import list_supported_locales


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_message_loader() -> MessageLoader:
    """
    Get application-scoped message catalog loader singleton.

    The loader owns catalog caching; negotiation never keeps catalogs of its own.

    Returns:
        MessageLoader: YAML loader reading from settings.i18n.LOCALES_DIR,
            limited to the locale catalog.

    Usage:
        @router.get("/messages")
        def messages(loader: MessageLoaderDep):
            return loader.load("en").messages
    """
    settings = get_settings()
    return YAMLMessageLoader(
        translations_dir=settings.i18n.LOCALES_DIR,
        use_cache=settings.i18n.MESSAGES_CACHE,
        supported_locales=[locale.code.value for locale in list_supported_locales()],
    )
