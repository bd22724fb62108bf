"""
Lambda handler responsible for deleting an uploaded image.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import NotFoundError, StoreFailureError, UnauthorizedError
from core.utils.auth import resolve_identity
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import DeleteImageRequest, DeleteImageResponse
from .service import DeleteService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle ``DELETE /images/{owner_id}/{sequence_id}``.

    This function:
    - Resolves the caller identity
    - Validates the path parameters
    - Delegates deletion to the service layer
    - Translates domain errors into HTTP responses
    """
    logger.info(
        "Received image delete request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    identity = resolve_identity(event)
    path_params = event.get("pathParameters") or {}

    is_valid, result = validate_request(
        DeleteImageRequest,
        {
            "owner_id": path_params.get("owner_id"),
            "sequence_id": path_params.get("sequence_id"),
        },
    )
    if not is_valid:
        return result

    request: DeleteImageRequest = result
    service = DeleteService()

    try:
        delete_result = service.delete_image(
            owner_id=request.owner_id,
            sequence_id=request.sequence_id,
            requester=identity,
        )

    except UnauthorizedError as exc:
        return ResponseBuilder.forbidden(exc.message)

    except NotFoundError:
        logger.warning(
            "Image not found during delete",
            extra={"owner_id": request.owner_id, "sequence_id": request.sequence_id},
        )
        return ResponseBuilder.not_found(
            f"Image not found: {request.owner_id}/{request.sequence_id}"
        )

    except StoreFailureError as exc:
        logger.exception(
            "Deletion failed",
            extra={"owner_id": request.owner_id, "sequence_id": request.sequence_id},
        )
        return ResponseBuilder.internal_error(exc.message)

    if delete_result["blob_deleted"]:
        metrics.add_metric(name="BlobsDeleted", unit=MetricUnit.Count, value=1)

    response = DeleteImageResponse(
        message="Image deleted successfully",
        **delete_result,
    )

    return ResponseBuilder.ok(response.model_dump())
