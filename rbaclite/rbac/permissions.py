"""
Permission management for rbaclite.

Permissions follow exactly the same lifecycle as roles, over their own map.
"""

from .base import NamedEntityManager
from .models import Permission


class PermissionManager(NamedEntityManager[Permission]):
    """
    Manager for permission CRUD operations.

    Example:
        ```python
        permission = await store.permissions.create("posts.write", "Write posts")
        same = await store.permissions.get(permission.id)
        ```
    """

    model = Permission
    entity_name = "Permission"
    argument_name = "permission"
