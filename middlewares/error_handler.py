import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException

from schemas.common import ErrorDetail, ErrorResponse
from services.grading.errors import GradingError
from services.repository import RecordNotFound

logger = logging.getLogger(__name__)


def _latency_ms(request: Request):
    started_at = getattr(request.state, "started_at", None)
    if started_at is None:
        return None
    return int((time.perf_counter() - started_at) * 1000)


def error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message),
        latency_ms=_latency_ms(request),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def add_error_handlers(app: FastAPI):
    @app.exception_handler(GradingError)
    async def grading_error_handler(request: Request, exc: GradingError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return error_response(request, 400, exc.code, str(exc))

    @app.exception_handler(RecordNotFound)
    async def not_found_handler(request: Request, exc: RecordNotFound):
        return error_response(request, 404, "NOT_FOUND", str(exc))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return error_response(request, exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # "body.class_score: Input should be less than or equal to 100; ..."
        message = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
        )
        return error_response(request, 422, "VALIDATION_ERROR", message)

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
        return error_response(request, 409, "CONFLICT", "Record conflicts with an existing record")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(request, 500, "INTERNAL_ERROR", str(exc))
