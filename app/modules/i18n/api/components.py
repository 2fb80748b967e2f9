"""Server-rendered HTML for localized pages.

The locale switcher renders one link per catalog entry. Links point back at
the current page with ``?switch=<code>``; the page route hands that to the
switch use case and answers with a redirect.
"""

from html import escape
from urllib.parse import urlencode

from modules.i18n.api.switcher import LocaleSwitcher
from modules.i18n.api.translator import Translator
from modules.i18n.domain.models import get_locale

HOME_PAGE_HTML = """<!DOCTYPE html>
<html lang="__LANG__" dir="__DIR__">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>__TITLE__</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif;
            margin: 0;
            min-height: 100vh;
            display: grid;
            place-items: center;
        }
        nav.locale-switcher { position: fixed; top: 6rem; right: 2rem; display: flex; gap: 0.5rem; }
        nav.locale-switcher a {
            border: 1px solid #e5e7eb;
            border-radius: 9999px;
            padding: 0.75rem 1rem;
            text-decoration: none;
            color: inherit;
        }
        nav.locale-switcher a[aria-current="true"] { background: #171717; color: #fff; }
    </style>
</head>
<body>
__SWITCHER__
    <main>
        <h1>__TITLE__</h1>
        <ol>
            <li>__GET_STARTED__ <code>app/locales</code>.</li>
            <li>__SAVE_CHANGES__</li>
        </ol>
        <p>
            <a href="https://vercel.com/new" rel="noopener noreferrer">__DEPLOY_NOW__</a>
            <a href="https://nextjs.org/docs" rel="noopener noreferrer">__READ_DOCS__</a>
        </p>
    </main>
    <footer>
        <a href="https://nextjs.org/learn" rel="noopener noreferrer">__LEARN__</a>
        <a href="https://vercel.com/templates" rel="noopener noreferrer">__EXAMPLES__</a>
        <a href="https://nextjs.org" rel="noopener noreferrer">__GO_TO_NEXTJS__</a>
    </footer>
</body>
</html>
"""


def render_locale_switcher(switcher: LocaleSwitcher, t: Translator, pathname: str) -> str:
    """Render the locale picker for the current request."""
    current = switcher.current_locale
    items = []
    for locale in switcher.locales:
        is_current = "true" if locale.code == current else "false"
        href = f"{pathname}?{urlencode({'switch': locale.code.value})}"
        label = t("LocaleSwitcher.switchTo", name=locale.name)
        items.append(
            f'        <a href="{escape(href)}" hreflang="{locale.code.value}" '
            f'aria-label="{escape(label)}" aria-current="{is_current}">'
            f'<span aria-hidden="true">{locale.flag}</span> '
            f"<strong>{locale.code.value.upper()}</strong></a>"
        )
    return (
        f'    <nav class="locale-switcher" aria-label="{escape(t("LocaleSwitcher.label"))}">\n'
        + "\n".join(items)
        + "\n    </nav>"
    )


def render_home_page(switcher: LocaleSwitcher, t: Translator, pathname: str) -> str:
    """Render the localized home page."""
    locale = get_locale(t.context.locale)
    home = Translator(t.context, "HomePage")
    replacements = {
        "__LANG__": locale.code.value,
        "__DIR__": locale.direction.value,
        "__SWITCHER__": render_locale_switcher(switcher, t, pathname),
        "__TITLE__": escape(home("title")),
        "__GET_STARTED__": escape(home("getStarted")),
        "__SAVE_CHANGES__": escape(home("saveChanges")),
        "__DEPLOY_NOW__": escape(home("deployNow")),
        "__READ_DOCS__": escape(home("readDocs")),
        "__LEARN__": escape(home("learn")),
        "__EXAMPLES__": escape(home("examples")),
        "__GO_TO_NEXTJS__": escape(home("goToNextjs")),
    }
    html = HOME_PAGE_HTML
    for placeholder, value in replacements.items():
        html = html.replace(placeholder, value)
    return html
