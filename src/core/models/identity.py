"""Caller identity as resolved by the API Gateway authorizer."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


ELEVATED_ROLES: frozenset[Role] = frozenset({Role.ADMIN})


class Identity(BaseModel):
    """Authenticated caller: owner id plus role."""

    model_config = ConfigDict(frozen=True)

    owner_id: StrictInt = Field(..., ge=1, description="Caller's owner id")
    role: Role = Field(default=Role.USER, description="Caller's role")

    @property
    def is_elevated(self) -> bool:
        return self.role in ELEVATED_ROLES
