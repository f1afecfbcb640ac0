"""
rbaclite RBAC models.

Pydantic models for roles, permissions and the associations between them.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class NamedEntity(BaseModel):
    """
    Common shape of roles and permissions.

    ``system_name`` is the machine key (e.g. "admin"), ``display_name`` the
    human-readable label. Neither is checked for uniqueness.
    """

    id: UUID
    system_name: str = Field(..., min_length=1)
    display_name: str = Field(..., min_length=1)
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class Role(NamedEntity):
    """
    A named set of permissions.

    Roles are linked to permissions through RolePermission records.
    """

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "system_name": "admin",
                "display_name": "Administrator",
                "description": "Full access",
            }
        },
    }


class Permission(NamedEntity):
    """A single grantable capability, e.g. ``posts.write``."""

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "id": "456e7890-e89b-12d3-a456-426614174000",
                "system_name": "posts.write",
                "display_name": "Write posts",
                "description": None,
            }
        },
    }


class RolePermission(BaseModel):
    """
    Association between a role and a permission.

    ``role_id`` and ``permission_id`` are not checked against the stored
    roles and permissions; an association may outlive either side.
    """

    id: UUID
    role_id: UUID
    permission_id: UUID

    model_config = {"from_attributes": True}
