"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.i18n import MessageLoader
from infrastructure.services.providers import get_settings, get_message_loader

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Message catalog loader dependency
MessageLoaderDep = Annotated[MessageLoader, Depends(get_message_loader)]

__all__ = [
    "SettingsDep",
    "MessageLoaderDep",
]
