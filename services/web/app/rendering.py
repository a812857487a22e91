"""
Document shell and layout rendering.

Every page template extends `layout.html` (header, navigation, footer), which
extends `document.html` (head metadata, stylesheets, announcer, scripts).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from services.web.app.announcer import RouteChangeAnnouncer
from services.web.app.settings import SETTINGS


TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_URL = "/static"


@dataclass(frozen=True)
class StylesheetLink:
    href: str
    media: str | None = None


def stylesheet_links() -> list[StylesheetLink]:
    return [
        StylesheetLink(f"{STATIC_URL}/styles/global.css"),
        StylesheetLink(f"{STATIC_URL}/styles/dark.css", media="(prefers-color-scheme: dark)"),
        StylesheetLink(f"{STATIC_URL}/styles/components.css"),
    ]


def _build_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals.update(
        static_url=STATIC_URL,
        site_owner=SETTINGS.site_owner,
        github_url=SETTINGS.github_url,
    )
    return env


ENV = _build_env()


def render_page(template: str, *, title: str | None = None, live_reload: bool = False, **context: Any) -> str:
    # A fresh announcer per render: the server never has a hydrated live region.
    announcer = RouteChangeAnnouncer()
    return ENV.get_template(template).render(
        title=title,
        links=stylesheet_links(),
        announcer=announcer.render(),
        live_reload=live_reload,
        livereload_url=SETTINGS.livereload_url,
        **context,
    )
