"""API request and response schemas using Pydantic.

Key distinction from domain/models.py:
  - schemas.py: API contracts with Pydantic validation
  - domain/models.py: the static locale catalog (frozen dataclasses)

Requested locale codes are plain strings on purpose: an unknown code must
reach SwitchLocaleUseCase and fail as InvalidLocaleError (400), not as a
schema validation error (422).
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from modules.i18n.domain.models import Locale


class LocaleResponse(BaseModel):
    """Catalog entry as exposed to clients."""

    code: str
    name: str
    native_name: str
    flag: str
    direction: str

    @classmethod
    def from_locale(cls, locale: Locale) -> "LocaleResponse":
        return cls(
            code=locale.code.value,
            name=locale.name,
            native_name=locale.native_name,
            flag=locale.flag,
            direction=locale.direction.value,
        )


class LocaleListResponse(BaseModel):
    """Ordered locale catalog and the default locale."""

    default_locale: str
    locales: List[LocaleResponse]


class LocaleContextResponse(BaseModel):
    """Negotiated locale and its messages."""

    locale: str
    messages: Dict[str, Any]


class SwitchLocaleRequest(BaseModel):
    """Switch request from a client that performs its own navigation.

    Attributes:
        locale: Requested locale code.
        pathname: Current localized path, e.g. "/en/dashboard/settings".
    """

    locale: str
    pathname: str = Field(default="/", max_length=2048)

    @field_validator("pathname")
    @classmethod
    def _absolute_path(cls, v: str) -> str:
        v = v.split("?", 1)[0].split("#", 1)[0]
        return v if v.startswith("/") else f"/{v}"


class SwitchLocaleResponse(BaseModel):
    """Where the client should navigate (replacing the current entry)."""

    locale: str
    pathname: str


class ErrorResponse(BaseModel):
    message: str
    locale: Any = None
