"""Maps exceptions onto the ``{success: false, error}`` envelope."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from intelliforms.exceptions import (
    ClientInputError,
    ConfigurationError,
    IntelliFormsError,
    MethodNotAllowed,
)
from intelliforms.logging.logger import Log

GENERIC_ERROR_MESSAGE = "An internal server error occurred."


def _is_production(request: Request) -> bool:
    return request.app.state.services.settings.is_production


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def handle_app_error(request: Request, exc: IntelliFormsError) -> JSONResponse:
    path = request.url.path
    if isinstance(exc, ConfigurationError):
        Log.error("Configuration error", path=path, error=exc)
    elif exc.status_code < 500:
        Log.warning("Request rejected", path=path, status=exc.status_code, error=exc)
    else:
        Log.error("Request failed", path=path, error_type=type(exc).__name__, error=exc)

    message = str(exc)
    if exc.status_code >= 500 and not exc.expose and _is_production(request):
        message = GENERIC_ERROR_MESSAGE
    return error_response(exc.status_code, message)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return await handle_app_error(request, ClientInputError(f"Invalid request: {exc.errors()}"))


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        return await handle_app_error(
            request, MethodNotAllowed(f"Method {request.method} not allowed.")
        )
    return error_response(exc.status_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    Log.error(
        "Unhandled exception",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=exc,
    )
    message = GENERIC_ERROR_MESSAGE if _is_production(request) else str(exc)
    return error_response(500, message or GENERIC_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IntelliFormsError, handle_app_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
