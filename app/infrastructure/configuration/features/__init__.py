"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.i18n import I18nFeatureSettings

__all__ = [
    "I18nFeatureSettings",
]
