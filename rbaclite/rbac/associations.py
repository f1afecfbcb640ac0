"""
Role-to-permission associations for rbaclite.

Associations reference roles and permissions by identifier only. Neither
side is checked for existence, and deleting a role or a permission leaves
its associations in place.
"""

from typing import Optional, Union
from uuid import UUID

from ..cancellation import CancellationToken, check_cancelled
from ..errors import (
    AssociationNotFoundError,
    CreateConflictError,
    DuplicateAssociationError,
    NotFoundError,
)
from ..storage import ConcurrentMap
from ..utils import IdFactory, new_id, not_default, resolve_id
from .models import Permission, Role, RolePermission

RoleRef = Union[Role, UUID]
PermissionRef = Union[Permission, UUID]


class RolePermissionManager:
    """
    Manager for role-to-permission associations.

    Example:
        ```python
        link = await store.associations.create(role, permission)
        await store.associations.get(link.id)
        await store.associations.delete(role.id, permission.id)
        ```
    """

    entity_name = "RolePermission"

    def __init__(self, id_factory: IdFactory = new_id) -> None:
        self._id_factory = id_factory
        self._items: ConcurrentMap[UUID, RolePermission] = ConcurrentMap()

    def __len__(self) -> int:
        return len(self._items)

    async def create(
        self,
        role: RoleRef,
        permission: PermissionRef,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> RolePermission:
        """
        Associate a permission with a role.

        Args:
            role: Role or role UUID
            permission: Permission or permission UUID
            cancellation: Optional token checked before any work

        Returns:
            The created association

        Raises:
            InvalidArgumentError: If either side is None or resolves to a nil id
            CreateConflictError: If the generated identifier is already taken
        """
        check_cancelled(cancellation)
        role_id = resolve_id(role, "role_id")
        permission_id = resolve_id(permission, "permission_id")

        association = RolePermission(
            id=self._id_factory(),
            role_id=role_id,
            permission_id=permission_id,
        )
        if not self._items.try_add(association.id, association):
            raise CreateConflictError(
                self.entity_name,
                association.id,
                f"permission {permission_id} to role {role_id}",
            )

        return association.model_copy()

    async def delete(
        self,
        role: RoleRef,
        permission: PermissionRef,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        """
        Remove the association between a role and a permission.

        Exactly one stored association must match the pair.

        Raises:
            AssociationNotFoundError: If no association matches
            DuplicateAssociationError: If more than one association matches
            NotFoundError: If the match was removed concurrently
        """
        check_cancelled(cancellation)
        role_id = resolve_id(role, "role_id")
        permission_id = resolve_id(permission, "permission_id")

        matches = self._items.find(
            lambda a: a.role_id == role_id and a.permission_id == permission_id
        )
        if not matches:
            raise AssociationNotFoundError(role_id, permission_id)
        if len(matches) > 1:
            raise DuplicateAssociationError(role_id, permission_id, len(matches))

        target = matches[0]
        if not self._items.try_remove(target.id, target):
            raise NotFoundError(self.entity_name, target.id)

    async def get(
        self,
        association_id: UUID,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> RolePermission:
        """
        Get an association by its own identifier.

        Raises:
            NotFoundError: If no association exists under the identifier
        """
        check_cancelled(cancellation)
        not_default(association_id, "id")

        association = self._items.try_get(association_id)
        if association is None:
            raise NotFoundError(self.entity_name, association_id)
        return association.model_copy()
