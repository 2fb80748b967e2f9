"""Infrastructure modules for the locale router.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nFeatureSettings, ServerSettings)
- logging: Structured logging setup and request context binding
- i18n: Message catalog models and loaders
- services: Dependency injection services (SettingsDep, MessageLoaderDep, get_settings)
"""
