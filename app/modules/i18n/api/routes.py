"""HTTP routes for the i18n module.

- ``router``: JSON API mounted under /api/v1
- ``page_router``: localized HTML pages; must be included last, its
  ``/{locale}`` pattern matches any single-segment path. The ``api``
  segment is reserved and answers 404.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from api.dependencies.rate_limits import get_limiter
from infrastructure.logging import get_module_logger
from modules.i18n.api import schemas
from modules.i18n.api.components import render_home_page
from modules.i18n.api.dependencies import (
    LocaleContextDep,
    LocaleSwitcherDep,
    NavigatorDep,
    TranslatorDep,
)
from modules.i18n.api.switcher import build_locale_switcher
from modules.i18n.domain.models import (
    DEFAULT_LOCALE,
    is_supported_locale,
    list_supported_locales,
)
from modules.i18n.infrastructure.navigation import RedirectNavigator
from modules.i18n.infrastructure.routing import locale_from_pathname

logger = get_module_logger()
limiter = get_limiter()

router = APIRouter(prefix="/locales", tags=["Locales"])
page_router = APIRouter(tags=["Pages"])

# First path segments owned by other routers; never a page
RESERVED_SEGMENTS = frozenset({"api"})


@router.get("", response_model=schemas.LocaleListResponse)
@limiter.limit("60/minute")
def list_locales(request: Request):  # pylint: disable=unused-argument
    """List supported locales in catalog order."""
    return schemas.LocaleListResponse(
        default_locale=DEFAULT_LOCALE.value,
        locales=[
            schemas.LocaleResponse.from_locale(locale)
            for locale in list_supported_locales()
        ],
    )


@router.get("/{locale}/messages", response_model=schemas.LocaleContextResponse)
@limiter.limit("60/minute")
def get_messages(
    request: Request, context: LocaleContextDep
):  # pylint: disable=unused-argument
    """Negotiated locale and messages for ``locale``.

    Unsupported codes resolve to the default locale; check ``locale`` in the
    response for the effective one.
    """
    return schemas.LocaleContextResponse(**context.to_dict())


@router.post(
    "/switch",
    response_model=schemas.SwitchLocaleResponse,
    responses={400: {"model": schemas.ErrorResponse}},
)
@limiter.limit("60/minute")
def switch_locale(request: Request, body: schemas.SwitchLocaleRequest):
    """Validate a switch and return the path to navigate to.

    The client replaces its current history entry with ``pathname``.
    """
    navigator = RedirectNavigator()
    switcher = build_locale_switcher(
        {"locale": locale_from_pathname(body.pathname)},
        body.pathname,
        navigator,
    )
    switcher.switch_locale(body.locale)
    return schemas.SwitchLocaleResponse(locale=body.locale, pathname=navigator.target)


def reject_reserved_segment(request: Request) -> None:
    """404 for paths under a reserved first segment, e.g. unknown API routes."""
    if request.path_params.get("locale") in RESERVED_SEGMENTS:
        raise HTTPException(status_code=404, detail="Not Found")


@page_router.get(
    "/{locale}",
    response_class=HTMLResponse,
    dependencies=[Depends(reject_reserved_segment)],
)
@page_router.get(
    "/{locale}/{path:path}",
    response_class=HTMLResponse,
    dependencies=[Depends(reject_reserved_segment)],
)
def localized_page(
    request: Request,
    context: LocaleContextDep,
    switcher: LocaleSwitcherDep,
    navigator: NavigatorDep,
    t: TranslatorDep,
    switch: Optional[str] = Query(default=None),
):
    """Render a localized page, or switch its locale with ``?switch=<code>``."""
    if switch is not None:
        switcher.switch_locale(switch)
        return navigator.response

    # Fallback renders must not overwrite the remembered locale
    if is_supported_locale(request.path_params.get("locale")):
        request.state.rendered_locale = context.locale
    logger.debug("page_rendered", locale=context.locale.value)
    return HTMLResponse(render_home_page(switcher, t, request.url.path))
