import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from expense_tracker.services.exceptions import ValidationError, StorageFailure

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure as {"error": message} with its status code"""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        error = ValidationError(describe_validation_errors(exc))
        return error_response(error.status_code, error.detail)

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Storage failure on {request.url.path}: {exc}")
        error = StorageFailure(str(exc))
        return error_response(error.status_code, error.detail)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def error_response(status_code: int, message) -> JSONResponse:
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Request failed with {status_code}: {message}")
    return JSONResponse(status_code=status_code, content={"error": message})


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one message, e.g. 'amount: Field required'"""
    parts = []
    for err in exc.errors():
        # Drop the leading "body"/"path" location segment
        loc = [str(part) for part in err.get("loc", ())[1:]]
        field = ".".join(loc) if loc else "body"
        parts.append(f"{field}: {err.get('msg')}")
    return "Validation failed: " + "; ".join(parts)
