"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from config.settings import settings
from src.kb_common.errors import AppError, UserNotFoundError
from src.kb_common.redis_client import close_redis
from src.kb_web.api.router import router as pages_router
from src.kb_web.middleware.request_log import RequestLogMiddleware
from src.kb_web.templating import NO_STORE_HEADERS, templates

logger = logging.getLogger("kb.app")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Shutdown: close the Redis pool if the multi-tenant page opened one."""
    yield
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(UserNotFoundError)
async def user_not_found_handler(request: Request, exc: UserNotFoundError) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "user_not_found.html",
        {"username": exc.username},
        status_code=exc.http_status,
        headers=NO_STORE_HEADERS,
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> HTMLResponse:
    logger.error("app error code=%d message=%s", exc.code, exc.message)
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "code": exc.code,
            "message": exc.message,
            "request_id": getattr(request.state, "request_id", None),
        },
        status_code=exc.http_status,
        headers=NO_STORE_HEADERS,
    )


app.include_router(pages_router)
