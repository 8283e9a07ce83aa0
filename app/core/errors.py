# app/core/errors.py
# Ошибки API и обработчики, превращающие их в JSON-конверт {status, message, errors?}.
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Базовая ошибка: HTTP-код, статус конверта и сообщение для клиента."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    envelope_status = "fail"
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class ConflictError(BadRequestError):
    # Дубликат username отдаём как 400, а не 409
    default_message = "Username already exists"


class UnauthorizedError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access token required"


class ForbiddenError(APIError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access token is invalid or expired"


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UnexpectedError(APIError):
    """Сбой хранилища или окружения: 500 с общим сообщением."""

    envelope_status = "error"


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[str]:
    """Собирает все нарушения схемы в список сообщений вида '"title" is required'."""
    messages = []
    for err in errors:
        name = _field_name(err.get("loc", ()))
        if err.get("type") == "missing":
            messages.append(f'"{name}" is required')
        else:
            messages.append(f'"{name}" {err.get("msg", "is invalid")}')
    return messages


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.envelope_status, "message": exc.message},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "status": "fail",
            "message": "Validation error",
            "errors": format_validation_errors(exc.errors()),
        },
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 404 на неизвестный маршрут, 405 и т.п. тоже в конверте
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "fail" if exc.status_code < 500 else "error", "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Глобальный обработчик ошибок: детали только в лог."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": "Something went wrong"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
