from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import get_message_loader, get_settings
from modules.i18n.core.negotiator import check_catalog_parity
from modules.i18n.domain.models import list_supported_locales

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _preload_catalogs(app: FastAPI, logger: BoundLogger) -> None:
    """Load every supported locale once and report key mismatches.

    A locale whose catalog is missing or corrupt fails startup: every request
    for it would fail anyway.
    """
    loader = get_message_loader()
    locales = [locale.code for locale in list_supported_locales()]
    try:
        app.state.missing_translation_keys = check_catalog_parity(loader, locales)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("catalog_preload_failed", error=str(exc))
        raise
    logger.info("catalogs_preloaded", locales=[code.value for code in locales])


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = configure_logging(settings=settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)
    _preload_catalogs(app, logger)

    yield

    logger.info("application_shutdown")
