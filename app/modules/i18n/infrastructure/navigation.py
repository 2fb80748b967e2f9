"""Navigator implementations for the HTTP host."""

from typing import Optional

from fastapi.responses import RedirectResponse

from modules.i18n.domain.repository import Navigator


class RedirectNavigator(Navigator):
    """Turns a navigation into an HTTP redirect.

    ``replace`` records the target; the caller returns ``response`` (or reads
    ``target`` for JSON clients). 303 makes the browser follow up with a GET
    without adding the switch request to history.
    """

    def __init__(self, status_code: int = 303):
        self.status_code = status_code
        self.target: Optional[str] = None

    def replace(self, pathname: str) -> None:
        self.target = pathname

    @property
    def navigated(self) -> bool:
        return self.target is not None

    @property
    def response(self) -> RedirectResponse:
        if self.target is None:
            raise RuntimeError("No navigation has been requested")
        return RedirectResponse(url=self.target, status_code=self.status_code)
