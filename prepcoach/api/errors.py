"""
Error responses for the HTTP API.

Maps the engine's error taxonomy onto status codes and a single JSON
body shape: ``{"success": false, "error": <code>, "message": <text>}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from prepcoach.core.errors import (
    EvaluationError,
    InterviewEngineError,
    NotOwnerError,
    PendingStepError,
    ProviderError,
    QuestionGenerationError,
    SessionAlreadyCompletedError,
    SessionNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[InterviewEngineError], int] = {
    ProviderError: 502,
    QuestionGenerationError: 503,
    EvaluationError: 503,
    SessionNotFoundError: 404,
    NotOwnerError: 403,
    SessionAlreadyCompletedError: 409,
    PendingStepError: 409,
    ValidationError: 422,
}


def status_for(error: InterviewEngineError) -> int:
    for error_type in type(error).__mro__:
        if error_type in STATUS_CODES:
            return STATUS_CODES[error_type]
    return 500


def error_body(code: str, message: str) -> dict:
    return {"success": False, "error": code, "message": message}


async def engine_error_handler(request: Request, exc: InterviewEngineError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.code}: {exc.message}")
    return JSONResponse(status_code=status, content=error_body(exc.code, exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    return JSONResponse(status_code=422, content=error_body(ValidationError.code, message))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the taxonomy handlers on an application."""
    app.add_exception_handler(InterviewEngineError, engine_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
