"""Locale-prefixed URL helpers.

Localized paths carry the locale code as their first segment:
``/en/dashboard/settings``.
"""

from typing import Optional


def locale_from_pathname(pathname: str) -> Optional[str]:
    """Return the first path segment, or None for the root path.

    The segment is returned as-is; callers decide whether it is supported.
    """
    segment = pathname.lstrip("/").split("/", 1)[0]
    return segment or None


def replace_locale_segment(pathname: str, current: str, target: str) -> str:
    """Swap the locale segment of ``pathname`` from ``current`` to ``target``.

    Only the first segment is compared, and only when it equals ``current``
    exactly; every other segment, and any trailing slash, is kept verbatim.
    A path that does not start with ``current`` (an unprefixed or fallback
    path) gets ``target`` prepended.

    >>> replace_locale_segment("/en/dashboard/settings", "en", "th")
    '/th/dashboard/settings'
    >>> replace_locale_segment("/", "en", "th")
    '/th'
    """
    if not pathname.startswith("/"):
        pathname = "/" + pathname

    segments = pathname.split("/")
    if segments[1] == current:
        segments[1] = target
        return "/".join(segments)

    if pathname == "/":
        return f"/{target}"
    return f"/{target}{pathname}"
