"""RBAC provider contract."""

from typing import Optional, Protocol, Union, runtime_checkable
from uuid import UUID

from ..cancellation import CancellationToken
from .models import Permission, Role, RolePermission


@runtime_checkable
class RbacProvider(Protocol):
    """Operations every RBAC data provider exposes."""

    async def create_role(
        self,
        system_name: str,
        display_name: str,
        description: Optional[str] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Role: ...

    async def update_role(
        self, role: Role, *, cancellation: Optional[CancellationToken] = None
    ) -> Role: ...

    async def delete_role(
        self, role: Union[Role, UUID], *, cancellation: Optional[CancellationToken] = None
    ) -> None: ...

    async def get_role(
        self, role_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> Role: ...

    async def exists_role(
        self, role_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> bool: ...

    async def create_permission(
        self,
        system_name: str,
        display_name: str,
        description: Optional[str] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> Permission: ...

    async def update_permission(
        self, permission: Permission, *, cancellation: Optional[CancellationToken] = None
    ) -> Permission: ...

    async def delete_permission(
        self,
        permission: Union[Permission, UUID],
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> None: ...

    async def get_permission(
        self, permission_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> Permission: ...

    async def exists_permission(
        self, permission_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> bool: ...

    async def create_permission_to_role_association(
        self,
        role: Union[Role, UUID],
        permission: Union[Permission, UUID],
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> RolePermission: ...

    async def delete_role_to_permission_association(
        self,
        role: Union[Role, UUID],
        permission: Union[Permission, UUID],
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> None: ...

    async def get_role_to_permission_association(
        self, association_id: UUID, *, cancellation: Optional[CancellationToken] = None
    ) -> RolePermission: ...
