"""Exception handlers mapping i18n errors onto HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from infrastructure.logging import get_module_logger
from modules.i18n.domain.errors import CatalogLoadError, InvalidLocaleError

logger = get_module_logger()


async def invalid_locale_handler(request: Request, exc: Exception):
    """Rejected switch requests never navigate; the caller gets a 400."""
    if isinstance(exc, InvalidLocaleError):
        return JSONResponse(
            status_code=400,
            content={"message": str(exc), "locale": str(exc.locale)},
        )


async def catalog_load_handler(request: Request, exc: Exception):
    if isinstance(exc, CatalogLoadError):
        logger.error(
            "request_failed_catalog_unavailable",
            path=request.url.path,
            locale=str(exc.locale),
        )
        return JSONResponse(
            status_code=500,
            content={"message": str(exc), "locale": str(exc.locale)},
        )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the i18n exception handlers on the application."""
    app.add_exception_handler(InvalidLocaleError, invalid_locale_handler)
    app.add_exception_handler(CatalogLoadError, catalog_load_handler)
