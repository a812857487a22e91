from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.web.app import observability
from services.web.app.boundaries import (
    CaughtResponse,
    UnhandledStatusError,
    render_catch_boundary,
    render_error_boundary,
)
from services.web.app.db import ENGINE, database_reachable, get_session
from services.web.app.logging import bind_request, configure_logging, logger
from services.web.app.rendering import render_page
from services.web.app.resume import ResumeData, load_resume
from services.web.app.settings import SETTINGS


STATIC_DIR = Path(__file__).resolve().parent / "static"


def add_error_boundary(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _catch_boundary(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
        caught = CaughtResponse.from_http_exception(exc.status_code, exc.detail)
        # Unmapped statuses raise UnhandledStatusError, which the middleware below renders.
        body = render_catch_boundary(caught, live_reload=SETTINGS.live_reload)
        return HTMLResponse(body, status_code=caught.status, headers=getattr(exc, "headers", None))

    @app.middleware("http")
    async def _error_boundary(request: Request, call_next: Callable) -> Response:
        bind_request(request.url.path, request.method)
        try:
            return await call_next(request)
        except UnhandledStatusError as e:
            body = render_error_boundary(e, status=e.status_code, live_reload=SETTINGS.live_reload)
            return HTMLResponse(body, status_code=e.status_code)
        except Exception as e:
            body = render_error_boundary(e, live_reload=SETTINGS.live_reload)
            return HTMLResponse(body, status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(title="Portfolio", version="0.1.0", docs_url=None, redoc_url=None)
    configure_logging(SETTINGS.log_level)
    if SETTINGS.tracing_enabled:
        observability.setup_tracing(app, service_name="web")
        observability.instrument_sqlalchemy(ENGINE)

    # Registered before metrics so the metrics middleware wraps the rendered error page.
    add_error_boundary(app)
    observability.add_metrics_middleware(app, service_name="web")
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/healthz", include_in_schema=False)
    async def healthz(session: AsyncSession = Depends(get_session)) -> JSONResponse:
        if await database_reachable(session):
            return JSONResponse({"ok": True, "database": "up"})
        return JSONResponse({"ok": False, "database": "down"}, status_code=503)

    @app.get("/", response_class=HTMLResponse)
    async def home() -> HTMLResponse:
        return HTMLResponse(render_page("home.html", title=SETTINGS.site_owner, live_reload=SETTINGS.live_reload))

    @app.get("/resume", response_class=HTMLResponse)
    async def resume() -> HTMLResponse:
        data = load_resume()
        logger.debug("page_rendered", route="/resume", skills=len(data.skills))
        return HTMLResponse(
            render_page(
                "resume.html",
                title=f"Resume | {SETTINGS.site_owner}",
                live_reload=SETTINGS.live_reload,
                resume=data,
            )
        )

    @app.get("/api/resume", response_model=ResumeData)
    async def resume_data() -> ResumeData:
        return load_resume()

    return app


app = create_app()


def serve() -> None:
    uvicorn.run(
        "services.web.app.main:app",
        host=SETTINGS.host,
        port=SETTINGS.port,
        reload=SETTINGS.live_reload,
        log_config=None,
    )
