from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from libs.catalog import build_rows, load_catalog
from libs.core.models import I18nConfig
from libs.core.settings import Settings, get_settings
from libs.i18n import DirectoryListingChecker, StringsLoader

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


# ---------------------------------------------------------------------------
# Dependency factories


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_loader(request: Request) -> StringsLoader:
    return request.app.state.loader


def get_catalog_path(settings: Settings = Depends(get_app_settings)) -> Path:
    return Path(settings.catalog_path)


def build_loader(settings: Settings) -> StringsLoader:
    config = I18nConfig(directory=settings.locales_dir, default_locale=settings.default_locale)
    checker = DirectoryListingChecker() if settings.cache_listing else None
    return StringsLoader(
        config,
        checker=checker,
        timeout=settings.resolve_timeout,
        cache=settings.cache_translations,
    )


def render_error(
    request: Request,
    status_code: int,
    exc: Optional[BaseException] = None,
) -> HTMLResponse:
    settings: Settings = request.app.state.settings
    context: Dict[str, Any] = {
        "status_code": status_code,
        "is_production": not settings.is_development,
        "message": str(exc) if exc is not None else "",
        "error_class": type(exc).__name__ if exc is not None else "",
    }
    return templates.TemplateResponse(request, "error.html", context, status_code=status_code)


# ---------------------------------------------------------------------------
# FastAPI application


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Lolomo")
    app.state.settings = settings
    app.state.loader = build_loader(settings)

    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
        return render_error(request, exc.status_code, exc)

    @app.get("/", include_in_schema=False)
    def index() -> RedirectResponse:
        return RedirectResponse(url="/list_of_movies")

    @app.get("/list_of_movies", response_class=HTMLResponse)
    async def list_of_movies(
        request: Request,
        locale: Optional[str] = Query(None),
        settings: Settings = Depends(get_app_settings),
        loader: StringsLoader = Depends(get_loader),
        catalog_path: Path = Depends(get_catalog_path),
    ) -> HTMLResponse:
        try:
            catalog, strings = await asyncio.gather(
                load_catalog(catalog_path),
                loader.get_strings(settings.strings_namespace, locale or settings.default_locale),
            )
            rows = build_rows(catalog)
        except Exception as exc:
            # no partial rendering: any failure yields the error page
            logger.exception("Listing page failed", extra={"locale": locale})
            return render_error(request, status.HTTP_500_INTERNAL_SERVER_ERROR, exc)

        return templates.TemplateResponse(
            request,
            "lolomo.html",
            {
                "rows": rows,
                "row_title": strings.row_title,
                "movie_title": strings.movie_title,
                "page_title": strings.get("page.title", "Movies"),
                "html_lang": strings.language or "en",
            },
        )

    return app


app = create_app()


__all__ = ["app", "create_app", "get_app_settings", "get_loader", "get_catalog_path"]
