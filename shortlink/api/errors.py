import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from shortlink.core.errors import BackendError
from shortlink.models.schemas import ErrorDetail, ErrorResponse

logger = structlog.get_logger(__name__)


def error_response(status_code: int, kind: str, message: str) -> JSONResponse:
    """Build an error envelope response."""
    body = ErrorResponse(error=ErrorDetail(kind=kind, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def backend_error_handler(request: Request, exc: BackendError) -> Response:
    """Backend failures are transient, so callers get a retryable 503."""
    logger.warning("request_failed", path=request.url.path, kind=exc.kind, error=str(exc))
    return error_response(503, exc.kind, str(exc))


async def validation_error_handler(_: Request, exc: RequestValidationError) -> Response:
    """Report malformed request bodies in the same envelope as every other error."""
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return error_response(422, "invalid_request", message)


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    logger.exception("unexpected_error", path=request.url.path)
    return error_response(500, "internal_error", "An unexpected error occurred.")
