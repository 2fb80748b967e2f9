"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    MessageLoaderDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_message_loader,
)

__all__ = [
    "SettingsDep",
    "MessageLoaderDep",
    "get_settings",
    "get_message_loader",
]
