# questionfeed/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


class QuestionValidationError(ValueError):
    """Client-fixable problem with a submission; maps to HTTP 400."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


async def _validation_error(request: Request, exc: QuestionValidationError):
    return JSONResponse(status_code=400, content={"error": exc.message})


async def _malformed_body(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def _http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuestionValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _malformed_body)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unhandled_error)
