"""Request validation utilities."""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.utils.response import ResponseBuilder

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Drops internal fields (url, ctx, input) and rewrites the noisiest
    messages into something a client can show.
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif "valid integer" in msg_lower:
            msg = "Must be an integer"
        elif "type" in msg_lower:
            msg = "Invalid value type"

        sanitized.append({"field": field, "message": msg})

    return sanitized


def validate_request(
    model: type[ModelT],
    data: dict[str, Any],
    *,
    request_id: str | None = None,
    cors_origin: str | None = None,
) -> tuple[bool, ModelT | dict[str, Any]]:
    """Validate request data against a Pydantic model.

    Returns:
        (True, validated_model) on success
        (False, error_response) on validation failure
    """
    try:
        validated = model(**data)
        return True, validated

    except ValidationError as exc:
        sanitized_errors = sanitize_validation_errors(exc.errors())
        return (
            False,
            ResponseBuilder.validation_error(
                message="Invalid request payload",
                details=sanitized_errors,
                request_id=request_id,
                cors_origin=cors_origin,
            ),
        )
