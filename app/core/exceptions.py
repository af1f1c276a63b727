# app/core/exceptions.py

"""
애플리케이션 공통 예외 계층과 FastAPI 예외 핸들러를 정의하는 모듈입니다.

- ValidationError  : 입력값이 제약 조건을 위반한 경우 (400)
- NotFoundError    : 리소스가 없거나 호출자 테넌트 소유가 아닌 경우 (404)
- PersistenceError : 데이터베이스/트랜잭션 실패 (500)

모든 오류 응답 본문은 {"message": "..."} 형태이며,
스택 트레이스나 내부 식별자는 노출하지 않습니다.
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """도메인 예외의 기본 클래스입니다."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class PersistenceError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Database operation failed"


def first_error_message(errors: Sequence[Any]) -> str:
    """
    pydantic 오류 목록에서 첫 번째로 위반된 제약 조건을 사람이 읽을 수 있는 문자열로 변환합니다.
    예: "body.parts.0.quantity: Input should be greater than 0"
    """
    if not errors:
        return ValidationError.default_message
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = first.get("msg", ValidationError.default_message)
    return f"{loc}: {msg}" if loc else msg


def _message_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        # 저장소 오류의 상세 내용은 응답에 포함하지 않습니다.
        return _message_response(exc.status_code, exc.default_message)
    return _message_response(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = first_error_message(exc.errors())
    logger.debug("Validation failed for %s %s: %s", request.method, request.url.path, message)
    return _message_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _message_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, AppError.default_message)


def register_exception_handlers(app: FastAPI) -> None:
    """FastAPI 애플리케이션에 공통 예외 핸들러를 등록합니다."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
