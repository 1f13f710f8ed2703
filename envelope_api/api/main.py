"""FastAPI application setup."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from envelope_api import config
from envelope_api.api.exceptions import ApiError
from envelope_api.api.response import ResResult
from envelope_api.api.routes import health
from envelope_api.logging_config import configure_logging

logger = logging.getLogger(__name__)


async def api_error_handler(request: Request, exc: ApiError) -> Response:
    """Handle application errors raised from routes."""
    return ResResult.with_error_code(exc.message, exc.code, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    """Handle FastAPI request validation failures."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return ResResult.with_error_code(f"Request validation failed: {details}", 422, 422)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Handle HTTP errors, including unknown routes and disallowed methods."""
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    response = ResResult.with_error_code(detail, exc.status_code, exc.status_code)
    # Keep headers such as Allow (405) and WWW-Authenticate (401).
    response.headers.update(exc.headers or {})
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Last-resort handler so clients still receive an envelope."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return ResResult.with_error("Internal server error")


EXCEPTION_HANDLERS = {
    ApiError: api_error_handler,
    RequestValidationError: request_validation_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: unhandled_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-producing exception handlers to ``app``."""
    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)


configure_logging()

app = FastAPI(
    title=config.APP_TITLE,
    description="Uniform JSON response envelopes",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register routes
app.include_router(health.router)
