"""
Lambda handler responsible for paginated gallery listing.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import IndexStoreError, UnauthorizedError
from core.utils.auth import resolve_identity
from core.utils.constants import METRICS_NAMESPACE
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import GalleryRequest
from .service import GalleryService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle ``GET /gallery/{owner_id}?anchor=&direction=``.

    Only the owner or an elevated role may read a gallery.
    """
    identity = resolve_identity(event)

    path_params = event.get("pathParameters") or {}
    params = event.get("queryStringParameters") or {}

    is_valid, result = validate_request(
        GalleryRequest,
        {
            "owner_id": path_params.get("owner_id"),
            **{name: params[name] for name in ("anchor", "direction") if name in params},
        },
    )
    if not is_valid:
        return result

    request: GalleryRequest = result
    service = GalleryService()

    try:
        page = service.list_gallery(
            requester=identity,
            owner_id=request.owner_id,
            anchor=request.anchor,
            direction=request.direction,
        )
    except UnauthorizedError as exc:
        return ResponseBuilder.forbidden(exc.message)
    except IndexStoreError as exc:
        logger.exception("Internal error listing gallery", extra={"owner_id": request.owner_id})
        return ResponseBuilder.internal_error(exc.message)

    return ResponseBuilder.ok(page.model_dump())
