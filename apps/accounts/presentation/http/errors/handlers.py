"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
모든 응답 본문은 ``{"detail": <message>, "code": <code>}`` 형태입니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apps.accounts.application.common.exceptions import ApplicationError, GatewayError
from apps.accounts.domain.exceptions.auth import AuthenticationError
from apps.accounts.domain.exceptions.base import DomainError
from apps.accounts.domain.exceptions.user import ConflictError, UserNotFoundError
from apps.accounts.domain.exceptions.validation import ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message, "code": code})


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # 첫 번째 검증 오류를 메시지로 사용
        errors = exc.errors()
        first_error = errors[0] if errors else {}
        message = first_error.get("msg", "Validation failed")
        field = ".".join(str(loc) for loc in first_error.get("loc", ()))
        logger.info(
            "Request validation failed",
            extra={"path": request.url.path, "field": field or None},
        )
        return _error(400, message, ValidationError.code)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _error(400, exc.message, exc.code)

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        logger.info(
            "Authentication failed",
            extra={
                "path": request.url.path,
                "error": type(exc).__name__,
                "reason": exc.reason,
            },
        )
        return _error(401, exc.message, exc.code)

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError):
        return _error(409, exc.message, exc.code)

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return _error(404, exc.message, exc.code)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error(400, exc.message, exc.code)

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        logger.error(
            "Gateway failure",
            extra={"path": request.url.path, "error": type(exc).__name__},
        )
        return _error(500, INTERNAL_ERROR_MESSAGE, exc.code)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error(400, exc.message, exc.code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return _error(500, INTERNAL_ERROR_MESSAGE, "INTERNAL_ERROR")
