"""
Common decorators and helpers for API Gateway Lambda handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import (
    FileSizeError,
    ImageServiceError,
    NotFoundError,
    StoreFailureError,
    UnauthenticatedError,
    UnauthorizedError,
    UnsupportedFormatError,
    ValidationError,
)
from core.utils.response import ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)

JsonDict = dict[str, Any]

# First match wins, so subclasses must precede their bases.
SERVICE_ERROR_STATUS: tuple[tuple[type[ImageServiceError], HTTPStatus], ...] = (
    (UnauthenticatedError, HTTPStatus.UNAUTHORIZED),
    (UnauthorizedError, HTTPStatus.FORBIDDEN),
    (NotFoundError, HTTPStatus.NOT_FOUND),
    (ValidationError, HTTPStatus.UNPROCESSABLE_ENTITY),
    (UnsupportedFormatError, HTTPStatus.UNPROCESSABLE_ENTITY),
    (FileSizeError, HTTPStatus.REQUEST_ENTITY_TOO_LARGE),
    (StoreFailureError, HTTPStatus.INTERNAL_SERVER_ERROR),
)


def status_for_service_error(exc: ImageServiceError) -> HTTPStatus:
    """Map a domain error onto the HTTP status it is surfaced with."""
    for error_type, status in SERVICE_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status
    return HTTPStatus.INTERNAL_SERVER_ERROR


def _get_user_friendly_message(exc: Exception) -> str:
    """
    Convert technical exception messages into user-friendly ones.

    Preserves specific validation messages while making generic errors friendly.
    """
    exc_str = str(exc)

    friendly_prefixes = (
        "Invalid",
        "Missing",
        "Required",
        "Must",
        "Cannot",
        "Unable to",
        "Image",
        "Anchor",
        "Owner",
    )

    if exc_str and any(exc_str.startswith(prefix) for prefix in friendly_prefixes):
        return exc_str

    if isinstance(exc, ValueError):
        return "The provided data is invalid. Please check your input and try again."

    if isinstance(exc, (KeyError, AttributeError)):
        return "A required field is missing. Please ensure all required fields are provided."

    if isinstance(exc, TypeError):
        return "The data format is incorrect. Please check the request format."

    return "We encountered an issue processing your request. Please try again."


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers.

    Provides:
    - Automatic CORS preflight (OPTIONS) handling
    - Translation of uncaught domain errors into their HTTP status
    - Request ID tracking and structured logging
    - A generic 500 for anything unexpected

    Example:
        @api_gateway_handler
        def lambda_handler(event, context):
            return {"statusCode": 200, "body": "Success"}
    """

    @wraps(func)
    def wrapper(
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return {
                "statusCode": HTTPStatus.NO_CONTENT.value,
                "headers": ResponseBuilder._build_headers(cors_origin),
                "body": "",
            }

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)

        except ImageServiceError as exc:
            status = status_for_service_error(exc)
            _log_error(
                "Service error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception" if status >= HTTPStatus.INTERNAL_SERVER_ERROR else "warning",
            )
            return ResponseBuilder.from_service_error(
                exc,
                status=status,
                request_id=request_id,
                cors_origin=cors_origin,
            )

        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            _log_error(
                "Validation error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.bad_request(
                _get_user_friendly_message(exc),
                request_id=request_id,
                cors_origin=cors_origin,
            )

        except Exception as exc:
            _log_error(
                "Unexpected error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.internal_error(
                "We're experiencing technical difficulties. Please try again in a few moments.",
                request_id=request_id,
                cors_origin=cors_origin,
            )

    return wrapper
