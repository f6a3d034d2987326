from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def validation_message(exc: RequestValidationError) -> str:
    """First validation failure as a single readable sentence."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    if err.get("type") == "json_invalid":
        return "Invalid JSON body"
    msg = str(err.get("msg", "Invalid request"))
    # messages raised from our own validators come prefixed by pydantic
    if msg.startswith("Value error, "):
        return msg[len("Value error, "):]
    loc = [str(part) for part in err.get("loc", ()) if part != "body"]
    if loc:
        return f"{'.'.join(loc)}: {msg}"
    return msg


def unparsable_path_id(exc: RequestValidationError) -> str | None:
    """Name of the path id that failed to parse (e.g. "employee_id"), if any."""
    for err in exc.errors():
        loc = err.get("loc", ())
        if len(loc) > 1 and loc[0] == "path":
            return str(loc[1])
    return None


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # an id that is not a number matches no row
    path_id = unparsable_path_id(exc)
    if path_id is not None:
        entity = path_id.removesuffix("_id").replace("_", " ").capitalize()
        return error_response(status.HTTP_404_NOT_FOUND, f"{entity} not found")
    message = validation_message(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
