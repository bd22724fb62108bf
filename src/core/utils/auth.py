"""Identity resolution and the authorization gate.

Identity comes from the API Gateway authorizer context. The service trusts
whatever the authorizer placed there; it only checks shape.
"""

from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import UnauthenticatedError, UnauthorizedError
from core.models.identity import Identity

logger = Logger(UTC=True)


def resolve_identity(event: dict[str, Any]) -> Identity:
    """Resolve the caller identity from an API Gateway proxy event.

    Expects ``requestContext.authorizer`` to carry ``owner_id`` and an
    optional ``role``.

    Raises:
        UnauthenticatedError: If no identity is present or it is malformed
    """
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    owner_id = authorizer.get("owner_id")

    if owner_id is None:
        raise UnauthenticatedError(message="Authentication required")

    try:
        return Identity(
            owner_id=int(owner_id),
            role=authorizer.get("role") or "user",
        )
    except (TypeError, ValueError, PydanticValidationError) as exc:
        logger.warning("Malformed authorizer context", extra={"owner_id": owner_id})
        raise UnauthenticatedError(message="Invalid identity") from exc


def authorize_owner_action(identity: Identity, owner_id: int) -> None:
    """Allow the owner or an elevated role to act on ``owner_id``'s records.

    Raises:
        UnauthorizedError: If neither condition holds
    """
    if identity.owner_id == owner_id or identity.is_elevated:
        return

    logger.warning(
        "Unauthorized cross-owner action",
        extra={"requester_id": identity.owner_id, "owner_id": owner_id},
    )
    raise UnauthorizedError(
        message="You don't have permission to perform this action",
        details={"owner_id": owner_id},
    )
