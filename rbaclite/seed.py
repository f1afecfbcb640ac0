"""
Seed files for rbaclite.

A seed file is a JSON document declaring roles, permissions and the grants
linking them by system name:

    {
        "roles": [{"system_name": "admin", "display_name": "Administrator"}],
        "permissions": [{"system_name": "posts.write", "display_name": "Write posts"}],
        "grants": [{"role": "admin", "permission": "posts.write"}]
    }
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .cancellation import CancellationToken
from .client import RbacStore
from .errors import SeedError
from .rbac import Permission, Role, RolePermission

logger = logging.getLogger(__name__)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class SeedEntity(BaseModel):
    """A role or permission declared in a seed file."""

    system_name: str = Field(..., min_length=1)
    display_name: str = Field(..., min_length=1)
    description: Optional[str] = None

    @field_validator("system_name", "display_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject names the store would refuse."""
        return _not_blank(v)


class SeedGrant(BaseModel):
    """Grant of a permission to a role, both referenced by system name."""

    role: str = Field(..., min_length=1)
    permission: str = Field(..., min_length=1)

    @field_validator("role", "permission")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return _not_blank(v)


class SeedFile(BaseModel):
    """Parsed seed file."""

    roles: List[SeedEntity] = Field(default_factory=list)
    permissions: List[SeedEntity] = Field(default_factory=list)
    grants: List[SeedGrant] = Field(default_factory=list)

    def problems(self) -> List[str]:
        """
        List consistency problems.

        Reports system names declared twice and grants referencing names
        that are not declared. An empty list means the file can be loaded.
        """
        found: List[str] = []
        for kind, entities in (("role", self.roles), ("permission", self.permissions)):
            counts = Counter(entity.system_name for entity in entities)
            found.extend(
                f"Duplicate {kind} system name: {name}"
                for name, count in counts.items()
                if count > 1
            )

        role_names = {role.system_name for role in self.roles}
        permission_names = {permission.system_name for permission in self.permissions}
        for index, grant in enumerate(self.grants):
            if grant.role not in role_names:
                found.append(f"Grant {index}: unknown role {grant.role}")
            if grant.permission not in permission_names:
                found.append(f"Grant {index}: unknown permission {grant.permission}")
        return found


class SeedResult(BaseModel):
    """Records created while loading a seed file, keyed by system name."""

    roles: Dict[str, Role] = Field(default_factory=dict)
    permissions: Dict[str, Permission] = Field(default_factory=dict)
    associations: List[RolePermission] = Field(default_factory=list)


def read_seed_file(path: Union[str, Path]) -> SeedFile:
    """
    Read and parse a seed file.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8
        ValidationError: If the JSON does not match the seed format
    """
    return SeedFile.model_validate_json(Path(path).read_text(encoding="utf-8"))


async def load_seed(
    store: RbacStore,
    seed: SeedFile,
    *,
    cancellation: Optional[CancellationToken] = None,
) -> SeedResult:
    """
    Create every role, permission and grant of a seed file in a store.

    The seed is checked before anything is written; a rejected seed leaves
    the store untouched.

    Args:
        store: Target store
        seed: Parsed seed file
        cancellation: Optional token forwarded to each store operation

    Returns:
        SeedResult with the created records

    Raises:
        SeedError: If the seed declares duplicates or unknown references
    """
    problems = seed.problems()
    if problems:
        raise SeedError("; ".join(problems))

    result = SeedResult()
    for entity in seed.roles:
        role = await store.create_role(
            entity.system_name,
            entity.display_name,
            entity.description,
            cancellation=cancellation,
        )
        result.roles[role.system_name] = role
        logger.debug("Created role %s (%s)", role.system_name, role.id)

    for entity in seed.permissions:
        permission = await store.create_permission(
            entity.system_name,
            entity.display_name,
            entity.description,
            cancellation=cancellation,
        )
        result.permissions[permission.system_name] = permission
        logger.debug("Created permission %s (%s)", permission.system_name, permission.id)

    for grant in seed.grants:
        association = await store.create_permission_to_role_association(
            result.roles[grant.role],
            result.permissions[grant.permission],
            cancellation=cancellation,
        )
        result.associations.append(association)
        logger.debug("Granted %s to %s", grant.permission, grant.role)

    logger.info(
        "Seed loaded: %d roles, %d permissions, %d grants",
        len(result.roles),
        len(result.permissions),
        len(result.associations),
    )
    return result
