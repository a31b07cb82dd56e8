"""Error Handlers — map every failure escaping a route to the JSON error envelope.

Invariants:
    - HolocronError -> its own status and to_response() body
    - RequestValidationError (malformed body, path or query) -> 400 VALIDATION_ERROR with details
    - Anything else -> 500 INTERNAL_ERROR; the exception text never reaches the client
    - 401 responses carry WWW-Authenticate: Bearer

Design Decisions:
    - Request validation answers 400, not FastAPI's 422: clients see one status for
      "your payload is wrong" whether pydantic or core/validate_film.py caught it
    - 4xx logged at WARNING, 5xx at ERROR: a 404 is not an incident
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from holocron.core.errors import ErrorCategory, ErrorSeverity, HolocronError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HolocronError, _holocron_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unhandled_error)


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> dict:
    error: dict = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        error["details"] = details
    return {"error": error}


async def _holocron_error(request: Request, exc: HolocronError) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{type(exc).__name__}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path, "uid": exc.context.uid},
    )
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if exc.http_status == status.HTTP_401_UNAUTHORIZED else None
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(), headers=headers,
    )


async def _request_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Rejected request on {request.url.path}: {len(details)} invalid field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details,
        ),
    )


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
