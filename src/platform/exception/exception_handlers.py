from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def error_body(error: str, *, message: str | None = None, details: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {'success': False, 'error': error}
    if message is not None:
        body['message'] = message
    if details is not None:
        body['details'] = details
    return body


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    return JSONResponse(
        status_code=error.status_code,
        content=error_body(error.message, message=error.description, details=error.details),
    )


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(str(exc)))


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body('Validation failed', details=_jsonable_errors(error.errors())),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = getattr(exc, 'status_code', status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(status_code=status_code, content=error_body('Route not found'))
    return JSONResponse(
        status_code=status_code, content=error_body(str(getattr(exc, 'detail', exc)))
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.exception(f'Unhandled error on {request.method} {request.url.path}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body('Internal server error', message=str(exc)),
    )


def _jsonable_errors(errors: Any) -> list[dict[str, Any]]:
    # pydantic error contexts may hold exception instances
    return [
        {'loc': list(err.get('loc', ())), 'msg': err.get('msg', ''), 'type': err.get('type', '')}
        for err in errors
    ]


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
