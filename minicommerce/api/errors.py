# minicommerce/api/errors.py
from datetime import datetime, timezone
from http import HTTPStatus
from typing import List

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from minicommerce.domain.errors import DomainError, ErrorKind
from minicommerce.domain.schemas import ApiError, FieldViolation
from minicommerce.utils.logging import get_logger

logger = get_logger(__name__)

#jedyne miejsce gdzie rodzaj bledu zamienia sie na kod HTTP
STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.CONFLICT: HTTPStatus.CONFLICT,
    ErrorKind.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
}


def build_error(
    status: int,
    message: str,
    path: str,
    violations: List[FieldViolation] | None = None,
) -> JSONResponse:
    body = ApiError(
        timestamp=datetime.now(timezone.utc),
        status=status,
        error=HTTPStatus(status).phrase,
        message=message,
        path=path,
        violations=violations,
    )
    #violations tylko dla bledow walidacji
    return JSONResponse(status_code=status, content=jsonable_encoder(body, exclude_none=True))


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "request"


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    return build_error(STATUS_BY_KIND[exc.kind], exc.message, request.url.path)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    violations = [FieldViolation(field=_field_name(e["loc"]), message=e["msg"]) for e in exc.errors()]
    return build_error(HTTPStatus.BAD_REQUEST, "Validation failed", request.url.path, violations)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return build_error(exc.status_code, str(exc.detail), request.url.path)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return build_error(HTTPStatus.INTERNAL_SERVER_ERROR, "Unexpected error", request.url.path)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
