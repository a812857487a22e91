"""
Screen-reader announcements for client-side route changes.

The browser half lives in `static/js/announcer.js`; this module holds the same
state machine so the server render and the tests share one definition of it.
"""

from __future__ import annotations

from enum import Enum

from markupsafe import Markup, escape


REGION_ID = "route-change-region"
HOME_LABEL = "Home page"

# Visually hidden but kept in the accessibility tree.
REGION_STYLE = {
    "border": "0",
    "clip-path": "inset(100%)",
    "clip": "rect(0 0 0 0)",
    "height": "1px",
    "margin": "-1px",
    "overflow": "hidden",
    "padding": "0",
    "position": "absolute",
    "width": "1px",
    "white-space": "nowrap",
    "word-wrap": "normal",
}


class AnnouncerState(str, Enum):
    NOT_HYDRATED = "not_hydrated"
    HYDRATED = "hydrated"
    ANNOUNCED = "announced"


def page_label(pathname: str, document_title: str | None) -> str:
    if pathname == "/":
        return HOME_LABEL
    return document_title or ""


class RouteChangeAnnouncer:
    """Live region announcing each navigation after the initial page load."""

    def __init__(self) -> None:
        self.state = AnnouncerState.NOT_HYDRATED
        self.message = ""
        self._pathname: str | None = None

    @property
    def hydrated(self) -> bool:
        return self.state is not AnnouncerState.NOT_HYDRATED

    def mount(self, pathname: str) -> None:
        if self.hydrated:
            return
        # The location seen at mount is the initial load and is never announced.
        self._pathname = pathname
        self.state = AnnouncerState.HYDRATED

    def navigate(self, pathname: str, document_title: str | None = None) -> None:
        if not self.hydrated:
            self._pathname = pathname
            return
        if pathname == self._pathname:
            return
        self._pathname = pathname
        self.message = f"Navigated to {page_label(pathname, document_title)}"
        self.state = AnnouncerState.ANNOUNCED

    def render(self) -> Markup:
        if not self.hydrated:
            return Markup("")
        style = "; ".join(f"{k}: {v}" for k, v in REGION_STYLE.items())
        return Markup(
            '<div aria-live="assertive" aria-atomic="true" id="{id}" style="{style}">{message}</div>'
        ).format(id=REGION_ID, style=style, message=escape(self.message))
