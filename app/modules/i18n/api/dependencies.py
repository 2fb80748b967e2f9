"""FastAPI dependencies for the i18n module.

Everything here is request-scoped: FastAPI builds a fresh navigator,
switcher and locale context for each request and shares them between the
dependencies of that request only.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.services import MessageLoaderDep
from modules.i18n.api.switcher import LocaleSwitcher, build_locale_switcher
from modules.i18n.api.translator import Translator
from modules.i18n.core.negotiator import RequestLocaleContext, RequestLocaleNegotiator
from modules.i18n.infrastructure.navigation import RedirectNavigator


def get_negotiator(loader: MessageLoaderDep) -> RequestLocaleNegotiator:
    return RequestLocaleNegotiator(loader=loader)


NegotiatorDep = Annotated[RequestLocaleNegotiator, Depends(get_negotiator)]


def get_locale_context(
    request: Request, negotiator: NegotiatorDep
) -> RequestLocaleContext:
    """Negotiate the request's locale from its ``locale`` path parameter."""
    return negotiator.negotiate(request.path_params.get("locale"))


LocaleContextDep = Annotated[RequestLocaleContext, Depends(get_locale_context)]


def get_redirect_navigator() -> RedirectNavigator:
    return RedirectNavigator()


NavigatorDep = Annotated[RedirectNavigator, Depends(get_redirect_navigator)]


def get_locale_switcher(request: Request, navigator: NavigatorDep) -> LocaleSwitcher:
    """Bind a switcher to this request's path parameters and pathname."""
    return build_locale_switcher(request.path_params, request.url.path, navigator)


LocaleSwitcherDep = Annotated[LocaleSwitcher, Depends(get_locale_switcher)]


def get_translator(context: LocaleContextDep) -> Translator:
    return Translator(context)


TranslatorDep = Annotated[Translator, Depends(get_translator)]
