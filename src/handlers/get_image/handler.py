"""
Lambda handler responsible for serving stored images.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import BlobStorageError, NotFoundError
from core.utils.auth import resolve_identity
from core.utils.constants import IMMUTABLE_CACHE_CONTROL, METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import GetImageRequest
from .service import GetService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle ``GET /images/{blob_id}``.

    Any authenticated caller may read any blob; the response body is the
    raw image, base64 encoded for API Gateway.
    """
    logger.info(
        "Received image fetch request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    resolve_identity(event)
    path_params = event.get("pathParameters") or {}

    is_valid, result = validate_request(
        GetImageRequest,
        {"blob_id": path_params.get("blob_id")},
    )
    if not is_valid:
        return result

    request: GetImageRequest = result
    service = GetService()

    try:
        content, content_type = service.get_image(request.blob_id)

    except NotFoundError:
        logger.warning("Blob not found", extra={"blob_id": request.blob_id})
        return ResponseBuilder.not_found(f"Image not found: {request.blob_id}")

    except BlobStorageError as exc:
        logger.exception("Get image failed", extra={"blob_id": request.blob_id})
        return ResponseBuilder.internal_error(exc.message)

    return ResponseBuilder.binary_response(
        content,
        content_type=content_type,
        headers={"Cache-Control": IMMUTABLE_CACHE_CONTROL},
    )
