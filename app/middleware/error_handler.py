"""
Last-resort error handling

Anything that escapes a route handler, or fails before one runs (body
parsing, dependencies), is logged and answered with a generic 500.
"""
import logging
import traceback
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.infrastructure.response import error_body

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "Internal server error"


def internal_error_response() -> JSONResponse:
    return JSONResponse(content=error_body(INTERNAL_SERVER_ERROR), status_code=500)


async def catch_unhandled_errors(request: Request, call_next: Callable) -> Response:
    try:
        return await call_next(request)
    except Exception as e:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(e)}")
        logger.error(traceback.format_exc())
        return internal_error_response()


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.error(f"Unreadable request body on {request.method} {request.url.path}: {exc.errors()}")
    return internal_error_response()


def register_error_handlers(app: FastAPI) -> FastAPI:
    """
    Install the catch-all middleware and the request validation handler
    """
    app.middleware("http")(catch_unhandled_errors)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    return app
