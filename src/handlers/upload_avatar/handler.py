"""
Lambda handler responsible for replacing the caller's avatar.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.auth import resolve_identity
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.time import utc_now_iso
from core.utils.validators import validate_request

from .models import AvatarUploadRequest, AvatarUploadResponse
from .service import AvatarService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle ``POST /avatar``.

    Decoding, size and format errors propagate to ``api_gateway_handler``
    and are answered with their mapped status.
    """
    logger.info(
        "Received avatar upload request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    identity = resolve_identity(event)

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError as exc:
        logger.exception("Invalid JSON body received", exc_info=exc)
        return ResponseBuilder.bad_request(message="Invalid JSON body")

    if not isinstance(body, dict):
        return ResponseBuilder.bad_request(message="Invalid JSON body")

    is_valid, result = validate_request(AvatarUploadRequest, body)
    if not is_valid:
        return result

    request: AvatarUploadRequest = result
    path = AvatarService().upload_avatar(owner_id=identity.owner_id, encoded=request.file)

    metrics.add_metric(name="AvatarsUploaded", unit=MetricUnit.Count, value=1)

    response = AvatarUploadResponse(
        owner_id=identity.owner_id,
        avatar_path=path,
        message="Avatar uploaded successfully",
        uploaded_at=utc_now_iso(),
    )

    return ResponseBuilder.created(response.model_dump())
