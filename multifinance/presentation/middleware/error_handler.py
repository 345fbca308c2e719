"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import structlog

from multifinance.domain.exceptions import (
    BusinessRuleException,
    DomainException,
    DuplicateConsumerException,
    InsufficientLimitException,
    NotFoundException,
    OperationTimeoutException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
            **extra,
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(NotFoundException)
    async def not_found_handler(
        request: Request,
        exc: NotFoundException,
    ) -> JSONResponse:
        """Handle missing or deleted entities."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(InsufficientLimitException)
    async def insufficient_limit_handler(
        request: Request,
        exc: InsufficientLimitException,
    ) -> JSONResponse:
        """Handle a principal above the remaining limit."""
        logger.info(
            "insufficient_limit",
            request_id=get_request_id(),
            requested=exc.requested_cents,
            remaining=exc.remaining_cents,
        )
        return _error_response(
            422,
            exc.code,
            exc.message,
            remaining_cents=exc.remaining_cents,
        )

    @app.exception_handler(DuplicateConsumerException)
    async def duplicate_consumer_handler(
        request: Request,
        exc: DuplicateConsumerException,
    ) -> JSONResponse:
        return _error_response(409, exc.code, exc.message)

    @app.exception_handler(BusinessRuleException)
    async def business_rule_handler(
        request: Request,
        exc: BusinessRuleException,
    ) -> JSONResponse:
        """Handle credit rule violations."""
        logger.warning(
            "business_rule_violation",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(OperationTimeoutException)
    async def timeout_handler(
        request: Request,
        exc: OperationTimeoutException,
    ) -> JSONResponse:
        logger.error(
            "request_deadline_exceeded",
            request_id=get_request_id(),
            operation=exc.operation,
        )
        return _error_response(504, exc.code, exc.message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed request bodies and parameters."""
        message = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return _error_response(400, "VALIDATION_ERROR", message)

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Handle storage failures."""
        logger.error(
            "storage_error",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "STORAGE_ERROR", "A storage error occurred.")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
