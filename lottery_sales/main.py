"""
Lottery Sales — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lottery_sales import __version__
from lottery_sales.config import BASE_FOLDER, SUBMISSIONS_FILE
from lottery_sales.logging_config import configure_logging
from lottery_sales.data.store import SubmissionRepository, SubmissionStore
from lottery_sales.errors import LotterySalesError, SubmissionValidationError
from lottery_sales.api.dependencies import set_store
from lottery_sales.api.router_meta import router as meta_router
from lottery_sales.api.router_submissions import router as submissions_router
from lottery_sales.api.router_reports import router as reports_router

logger = logging.getLogger(__name__)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(LotterySalesError)
    async def domain_error(request: Request, exc: LotterySalesError):
        body = {"message": exc.message}
        if isinstance(exc, SubmissionValidationError):
            body["errors"] = exc.errors
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(store: SubmissionRepository | None = None) -> FastAPI:
    """Build the app. Pass ``store`` to skip loading the JSON snapshot (tests)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            set_store(store)
        else:
            BASE_FOLDER.mkdir(parents=True, exist_ok=True)
            loaded = SubmissionStore(SUBMISSIONS_FILE).load()
            set_store(loaded)
            logger.info("Lottery Sales ready — %d submissions (data dir %s)", loaded.count(), BASE_FOLDER)
        yield
        set_store(None)

    app = FastAPI(
        title="Lottery Sales API",
        description="Weekly lottery ticket-sales collection, reports and exports",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    _install_error_handlers(app)

    app.include_router(meta_router)
    app.include_router(submissions_router)
    app.include_router(reports_router)

    return app


def build_app() -> FastAPI:
    """Entry point for uvicorn/gunicorn."""
    configure_logging()
    return create_app()


app = build_app()
