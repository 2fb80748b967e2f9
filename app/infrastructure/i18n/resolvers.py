"""Locale detection from HTTP request metadata.

Used only to pick the landing locale for an unprefixed request; once a
request carries a locale path segment the path is authoritative.
"""

from typing import Optional, Sequence

import structlog

logger = structlog.get_logger().bind(component="i18n.resolver")


def parse_accept_language(accept_language: Optional[str]) -> list[str]:
    """Parse an Accept-Language header into language ranges by preference.

    "th-TH,th;q=0.9,en;q=0.8" -> ["th-TH", "th", "en"]

    Ranges with an unparsable quality count as q=1.0; ranges with q=0 and the
    "*" wildcard are dropped. The sort is stable, so equal weights keep their
    header order.

    Args:
        accept_language: Raw header value.

    Returns:
        Language ranges, most preferred first.
    """
    if not accept_language:
        return []

    preferences = []
    for part in accept_language.split(","):
        lang_range, _, params = part.partition(";")
        lang_range = lang_range.strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 1.0
        if quality <= 0:
            continue

        preferences.append((lang_range, quality))

    return [lang for lang, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]


class LocaleResolver:
    """Resolves a supported locale code from request metadata.

    Resolution order:
    1. Persisted locale (cookie), if supported
    2. Accept-Language header, if detection is enabled
    3. Default locale
    """

    def __init__(self, supported_locales: Sequence[str], default_locale: str):
        """Initialize locale resolver.

        Args:
            supported_locales: Locale codes the site can render.
            default_locale: Fallback locale when no preference is found.
        """
        self.supported_locales = list(supported_locales)
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale)

    def resolve_from_header(self, accept_language: Optional[str]) -> str:
        """Resolve a locale from the Accept-Language header.

        Each range is first compared to the supported codes (case-insensitive),
        then by its primary language subtag, so "th-TH" selects "th".

        Args:
            accept_language: Accept-Language header value.

        Returns:
            Resolved locale code, or the default if none match.
        """
        for lang_range in parse_accept_language(accept_language):
            for code in self.supported_locales:
                if code.lower() == lang_range.lower():
                    self.log.debug("resolved_from_header", locale=code)
                    return code

            primary = lang_range.split("-")[0].lower()
            for code in self.supported_locales:
                if code.split("-")[0].lower() == primary:
                    self.log.debug("resolved_from_header", locale=code)
                    return code

        self.log.debug("no_matching_locale_in_header")
        return self.default_locale

    def resolve(
        self,
        persisted_locale: Optional[str] = None,
        accept_language: Optional[str] = None,
        detect: bool = True,
    ) -> str:
        """Resolve the landing locale for an unprefixed request.

        Args:
            persisted_locale: Locale remembered from an earlier visit.
            accept_language: Accept-Language header value.
            detect: Whether the header may be consulted.

        Returns:
            A supported locale code.
        """
        if persisted_locale in self.supported_locales:
            return persisted_locale
        if detect:
            return self.resolve_from_header(accept_language)
        return self.default_locale
