"""Fixtures for server module unit tests."""

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from modules.i18n.domain.models import LocaleCode
from server.locale_middleware import LocaleMiddleware


def _build_app(**middleware_kwargs) -> FastAPI:
    app = FastAPI()
    app.add_middleware(LocaleMiddleware, **middleware_kwargs)

    @app.get("/page")
    def page(request: Request):
        request.state.rendered_locale = LocaleCode.TH
        return {"ok": True}

    @app.get("/missing")
    def missing(request: Request):
        request.state.rendered_locale = LocaleCode.TH
        return JSONResponse(status_code=404, content={"message": "Not Found"})

    @app.get("/api")
    def api():
        return {"ok": True}

    return app


@pytest.fixture
def middleware_client():
    """Client for an app wrapped in LocaleMiddleware with detection on."""
    return TestClient(_build_app())


@pytest.fixture
def no_detect_client():
    """Client for an app wrapped in LocaleMiddleware with detection off."""
    return TestClient(_build_app(cookie_name="site_locale", detect=False))
