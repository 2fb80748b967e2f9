from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router, page_router
from api.dependencies.rate_limits import setup_rate_limiter
from infrastructure.configuration import Settings
from infrastructure.logging import configure_logging
from infrastructure.services import get_settings
from modules.i18n.api.handlers import setup_exception_handlers
from server.lifespan import lifespan
from server.locale_middleware import LocaleMiddleware


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to configure middleware with; defaults to the
            application-scoped singleton.
    """
    settings = settings or get_settings()
    configure_logging(settings=settings)

    app = FastAPI(lifespan=lifespan)
    setup_rate_limiter(app)
    setup_exception_handlers(app)

    app.add_middleware(
        LocaleMiddleware,
        cookie_name=settings.i18n.LOCALE_COOKIE,
        detect=settings.i18n.LOCALE_DETECTION,
    )

    allow_origins = ["*"] if settings.is_production else settings.server.allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    # Catch-all "/{locale}" patterns go last
    app.include_router(page_router)
    return app


handler = create_app()
