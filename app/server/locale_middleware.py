from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.i18n import LocaleResolver
from infrastructure.logging import bind_request_context, get_module_logger
from modules.i18n.domain.models import DEFAULT_LOCALE, list_supported_locales

logger = get_module_logger()


class LocaleMiddleware(BaseHTTPMiddleware):
    """Routes unprefixed requests to a locale and remembers the rendered one.

    - "/" redirects to "/<code>", picking the cookie locale, then the
      Accept-Language header (when detection is on), then the default.
    - Rendered localized pages store their locale in a cookie.
    - Every request runs inside a bound logging context.
    """

    def __init__(self, app, cookie_name: str = "NEXT_LOCALE", detect: bool = True):
        super().__init__(app)
        self.cookie_name = cookie_name
        self.detect = detect
        self.resolver = LocaleResolver(
            supported_locales=[locale.code.value for locale in list_supported_locales()],
            default_locale=DEFAULT_LOCALE.value,
        )

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get("X-Correlation-ID"),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            if request.url.path == "/" and request.method in ("GET", "HEAD"):
                response = self._redirect_root(request)
            else:
                response = await call_next(request)
                rendered = getattr(request.state, "rendered_locale", None)
                if rendered is not None and 200 <= response.status_code < 300:
                    response.set_cookie(
                        self.cookie_name,
                        rendered.value,
                        max_age=60 * 60 * 24 * 365,
                        samesite="lax",
                    )

            response.headers["X-Correlation-ID"] = correlation_id
            return response

    def _redirect_root(self, request) -> RedirectResponse:
        locale = self.resolver.resolve(
            persisted_locale=request.cookies.get(self.cookie_name),
            accept_language=request.headers.get("accept-language"),
            detect=self.detect,
        )
        target = f"/{locale}"
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.debug("root_redirected", locale=locale)
        return RedirectResponse(url=target, status_code=307)
