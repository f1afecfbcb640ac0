"""
rbaclite RBAC module.

Provides in-memory management of roles, permissions and their associations.
"""

from .associations import RolePermissionManager
from .base import NamedEntityManager
from .models import NamedEntity, Permission, Role, RolePermission
from .permissions import PermissionManager
from .provider import RbacProvider
from .roles import RoleManager

__all__ = [
    # Managers
    "RoleManager",
    "PermissionManager",
    "RolePermissionManager",
    "NamedEntityManager",
    # Contract
    "RbacProvider",
    # Models
    "NamedEntity",
    "Role",
    "Permission",
    "RolePermission",
]
