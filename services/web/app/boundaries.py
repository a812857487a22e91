"""
Alternate renders used in place of a failed route.

The catch boundary handles non-success statuses raised as `HTTPException`
(including the router's own 404). The error boundary handles anything else a
route lets escape. Both render inside the regular document shell and layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus

from services.web.app import observability
from services.web.app.logging import logger
from services.web.app.rendering import render_page


class CatchKind(str, Enum):
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    OTHER = "other"


CATCH_MESSAGES: dict[CatchKind, str] = {
    CatchKind.UNAUTHORIZED: "Oops! Looks like you tried to visit a page that you do not have access to.",
    CatchKind.NOT_FOUND: "Oops! Looks like you tried to visit a page that does not exist.",
}


class UnhandledStatusError(RuntimeError):
    """A caught response with no message mapping, escalated to the error boundary."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class CaughtResponse:
    status: int
    status_text: str
    data: str | None = None

    @classmethod
    def from_http_exception(cls, status_code: int, detail: object) -> CaughtResponse:
        try:
            status_text = HTTPStatus(status_code).phrase
        except ValueError:
            status_text = ""
        data = str(detail) if detail and detail != status_text else None
        return cls(status=status_code, status_text=status_text, data=data)


def classify(status: int) -> CatchKind:
    if status == HTTPStatus.UNAUTHORIZED:
        return CatchKind.UNAUTHORIZED
    if status == HTTPStatus.NOT_FOUND:
        return CatchKind.NOT_FOUND
    return CatchKind.OTHER


def render_catch_boundary(caught: CaughtResponse, *, live_reload: bool = False) -> str:
    kind = classify(caught.status)
    if kind is CatchKind.OTHER:
        raise UnhandledStatusError(caught.data or caught.status_text, caught.status)

    observability.record_boundary(kind.value, caught.status)
    return render_page(
        "catch.html",
        title=f"{caught.status} {caught.status_text}",
        live_reload=live_reload,
        status=caught.status,
        status_text=caught.status_text,
        message=CATCH_MESSAGES[kind],
    )


def render_error_boundary(error: BaseException, *, status: int = 500, live_reload: bool = False) -> str:
    logger.error("route_error", error=str(error), error_type=type(error).__name__, exc_info=error)
    observability.record_boundary("error", status)
    return render_page(
        "error.html",
        title="Error!",
        live_reload=live_reload,
        error_message=str(error),
    )
