"""
Lambda handler responsible for batch image upload.
"""

from http import HTTPStatus
import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import StoreFailureError
from core.models.image import GalleryImage
from core.utils.auth import resolve_identity
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import ImageUploadRequest, ImageUploadResponse
from .service import UploadService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle batch image upload requests.

    Expected API Gateway event structure:
    {
        "body": "{\"files\": [\"<base64>\", ...]}",
        "requestContext": {"authorizer": {"owner_id": "42", "role": "user"}}
    }

    Payloads that fail decoding, size or format checks are reported under
    ``rejected``; the rest are stored and indexed in input order.
    """
    logger.info(
        "Received image upload request",
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

    is_valid, result = validate_request(ImageUploadRequest, body)
    if not is_valid:
        return result

    request: ImageUploadRequest = result
    service = UploadService()

    try:
        upload = service.upload_images(owner_id=identity.owner_id, files=request.files)

    except StoreFailureError as exc:
        logger.exception(
            "Infrastructure error during image upload",
            extra={"owner_id": identity.owner_id},
        )
        return ResponseBuilder.from_service_error(exc, status=HTTPStatus.INTERNAL_SERVER_ERROR)

    metrics.add_metric(name="ImagesAccepted", unit=MetricUnit.Count, value=len(upload.accepted))
    metrics.add_metric(name="ImagesRejected", unit=MetricUnit.Count, value=len(upload.rejected))

    response = ImageUploadResponse(
        owner_id=upload.owner_id,
        images=[
            GalleryImage(sequence_id=record.sequence_id, blob_id=record.blob_id)
            for record in upload.accepted
        ],
        rejected=upload.rejected,
        accepted_count=len(upload.accepted),
        rejected_count=len(upload.rejected),
        message=(
            "Images uploaded successfully" if upload.accepted else "No images were accepted"
        ),
    )

    if not upload.accepted:
        return ResponseBuilder.ok(response.model_dump())

    return ResponseBuilder.created(response.model_dump())
