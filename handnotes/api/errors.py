"""Maps exceptions onto the JSON error envelope: {"error": {"message", ...}}."""

from typing import Any

import psycopg
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from handnotes.database.errors import describe_database_error
from handnotes.logging.logger import Log
from handnotes.pages.exceptions import (
    DocumentNotFoundError,
    InvalidRequestError,
    NotAnImageError,
    PageError,
    PageNotFoundError,
    SagaStepError,
)
from handnotes.storage.exceptions import StorageError
from handnotes.transcription.exceptions import (
    TranscriptionError,
    TranscriptionOutputError,
)

STATUS_BY_ERROR: dict[type[Exception], int] = {
    InvalidRequestError: 400,
    NotAnImageError: 400,
    DocumentNotFoundError: 404,
    PageNotFoundError: 404,
}


def json_error(
    message: str,
    status: int = 500,
    extra: dict[str, Any] | None = None,
    **fields: Any,
) -> JSONResponse:
    error: dict[str, Any] = {"message": message, **fields}
    if extra:
        error["extra"] = extra
    return JSONResponse({"error": error}, status_code=status)


def status_for(exc: Exception) -> int:
    for error_cls in type(exc).__mro__:
        status = STATUS_BY_ERROR.get(error_cls)
        if status is not None:
            return status
    return 500


def error_response(exc: Exception, extra: dict[str, Any] | None = None) -> JSONResponse:
    """Build the envelope for any exception raised while serving a request."""
    extra = dict(extra or {})
    if isinstance(exc, psycopg.Error):
        payload = describe_database_error(exc)
        message = payload.pop("message")
        return json_error(message, 500, extra, **payload)
    if isinstance(exc, TranscriptionOutputError) and exc.raw_excerpt is not None:
        extra["raw"] = exc.raw_excerpt
    return json_error(str(exc) or "Unknown server error", status_for(exc), extra)


async def _handle_saga_error(_request: Request, exc: SagaStepError) -> JSONResponse:
    return error_response(exc.cause, extra={"step": exc.step})


async def _handle_known_error(_request: Request, exc: Exception) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        Log.error(f"{type(exc).__name__}: {exc}")
    return error_response(exc)


async def _handle_request_validation(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return json_error("Invalid request", 400, details=jsonable_encoder(exc.errors()))


async def _handle_http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = json_error(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unhandled error: {exc}")
    return json_error(str(exc) or "Unknown server error", 500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SagaStepError, _handle_saga_error)
    for error_cls in (PageError, StorageError, TranscriptionError, psycopg.Error):
        app.add_exception_handler(error_cls, _handle_known_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(Exception, _handle_unexpected)
