"""Exception handlers rendering every failure as {message, errors?}."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from private_markets.core.errors import AppError
from .deps import format_pydantic_errors

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods on known paths are both unmatched routes
    if exc.status_code in (404, 405):
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        return JSONResponse(status_code=404, content={"message": f"Route {url} not found"})
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_pydantic_errors(exc.errors())
    return JSONResponse(status_code=400, content={"message": "Validation failed", "errors": errors})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Full detail stays in the server log
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
