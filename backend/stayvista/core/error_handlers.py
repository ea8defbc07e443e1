# stayvista/core/error_handlers.py
import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stayvista.core.exceptions import StayVistaError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, detail=None) -> JSONResponse:
    content = {"success": False, "message": message}
    if detail is not None:
        content["detail"] = jsonable_encoder(detail)
    return JSONResponse(status_code=status_code, content=content)


async def stayvista_exception_handler(request: Request, exc: StayVistaError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.message, exc.detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error_response(422, "Validation failed", exc.errors())


async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal server error")
