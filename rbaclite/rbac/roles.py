"""
Role management for rbaclite.

Handles CRUD operations for roles held in memory.
"""

from .base import NamedEntityManager
from .models import Role


class RoleManager(NamedEntityManager[Role]):
    """
    Manager for role CRUD operations.

    Example:
        ```python
        store = RbacStore()

        role = await store.roles.create("editor", "Editor", "Can edit posts")
        role.display_name = "Content editor"
        role = await store.roles.update(role)

        if await store.roles.exists(role.id):
            await store.roles.delete(role)
        ```
    """

    model = Role
    entity_name = "Role"
    argument_name = "role"
