"""
Main rbaclite store.

This is the primary interface users interact with.
"""

from typing import Optional, Union
from uuid import UUID

from .cancellation import CancellationToken
from .config import RbacLiteConfig, load_config
from .rbac import (
    Permission,
    PermissionManager,
    Role,
    RoleManager,
    RolePermission,
    RolePermissionManager,
)
from .utils import IdFactory, new_id


class RbacStore:
    """
    In-memory RBAC data provider.

    Owns three independent maps (roles, permissions, associations), each
    behind its own manager. Every operation is safe to call concurrently
    from multiple threads or tasks; none of them suspends.

    Example:
        ```python
        from rbaclite import RbacStore

        store = RbacStore()

        admin = await store.create_role("admin", "Administrator")
        write = await store.create_permission("posts.write", "Write posts")
        link = await store.create_permission_to_role_association(admin, write)

        # The same operations through the managers
        await store.roles.get(admin.id)
        await store.associations.get(link.id)
        ```
    """

    def __init__(
        self,
        config: Optional[RbacLiteConfig] = None,
        id_factory: IdFactory = new_id,
    ) -> None:
        """
        Initialize an empty store.

        Args:
            config: Optional configuration. The store itself reads nothing
                from it; it records the settings the store was built with
                (e.g. by the CLI)
            id_factory: Callable producing identifiers for new records
        """
        self.config = config
        self.roles = RoleManager(id_factory)
        self.permissions = PermissionManager(id_factory)
        self.associations = RolePermissionManager(id_factory)

    @classmethod
    async def create(cls, **kwargs) -> "RbacStore":
        """
        Create a store with configuration loaded from the environment.

        Args:
            **kwargs: Configuration overrides

        Returns:
            Empty RbacStore
        """
        return cls(config=load_config(**kwargs))

    # Roles

    async def create_role(
        self,
        system_name: str,
        display_name: str,
        description: Optional[str] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Role:
        """Create a role. See RoleManager.create."""
        return await self.roles.create(
            system_name, display_name, description, cancellation=cancellation
        )

    async def update_role(
        self, role: Role, *, cancellation: Optional[CancellationToken] = None
    ) -> Role:
        """Replace a stored role with a single compare-and-swap."""
        return await self.roles.update(role, cancellation=cancellation)

    async def delete_role(
        self, role: Union[Role, UUID], *, cancellation: Optional[CancellationToken] = None
    ) -> None:
        """Delete a role by id or by record. Associations are kept."""
        await self.roles.delete(role, cancellation=cancellation)

    async def get_role(
        self, role_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> Role:
        return await self.roles.get(role_id, cancellation=cancellation)

    async def exists_role(
        self, role_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> bool:
        return await self.roles.exists(role_id, cancellation=cancellation)

    # Permissions

    async def create_permission(
        self,
        system_name: str,
        display_name: str,
        description: Optional[str] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Permission:
        """Create a permission. See PermissionManager.create."""
        return await self.permissions.create(
            system_name, display_name, description, cancellation=cancellation
        )

    async def update_permission(
        self, permission: Permission, *, cancellation: Optional[CancellationToken] = None
    ) -> Permission:
        return await self.permissions.update(permission, cancellation=cancellation)

    async def delete_permission(
        self,
        permission: Union[Permission, UUID],
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        await self.permissions.delete(permission, cancellation=cancellation)

    async def get_permission(
        self, permission_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> Permission:
        return await self.permissions.get(permission_id, cancellation=cancellation)

    async def exists_permission(
        self, permission_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> bool:
        return await self.permissions.exists(permission_id, cancellation=cancellation)

    # Associations

    async def create_permission_to_role_association(
        self,
        role: Union[Role, UUID],
        permission: Union[Permission, UUID],
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> RolePermission:
        """
        Associate a permission with a role.

        Neither side is checked for existence.
        """
        return await self.associations.create(role, permission, cancellation=cancellation)

    async def delete_role_to_permission_association(
        self,
        role: Union[Role, UUID],
        permission: Union[Permission, UUID],
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        """Remove the single association between a role and a permission."""
        await self.associations.delete(role, permission, cancellation=cancellation)

    async def get_role_to_permission_association(
        self, association_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> RolePermission:
        return await self.associations.get(association_id, cancellation=cancellation)
