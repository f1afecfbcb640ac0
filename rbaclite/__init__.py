"""
rbaclite - In-memory role-based access control data provider.

Stores roles, permissions and role-to-permission associations and exposes
create/read/update/delete/exists operations over them.

Example:
    ```python
    from rbaclite import RbacStore

    store = RbacStore()

    admin = await store.create_role("admin", "Administrator")
    write = await store.create_permission("posts.write", "Write posts")
    await store.create_permission_to_role_association(admin, write)

    admin.display_name = "Admins"
    await store.update_role(admin)

    await store.delete_role_to_permission_association(admin, write)
    await store.delete_role(admin)
    ```
"""

__version__ = "0.1.0"

from .cancellation import CancellationToken
from .client import RbacStore
from .config import RbacLiteConfig, load_config
from .errors import (
    AssociationNotFoundError,
    ConflictError,
    CreateConflictError,
    DeleteConflictError,
    DuplicateAssociationError,
    IntegrityViolationError,
    InvalidArgumentError,
    NotFoundError,
    OperationCancelledError,
    RbacError,
    SeedError,
    UpdateConflictError,
)
from .rbac import Permission, RbacProvider, Role, RolePermission
from .seed import SeedFile, SeedResult, load_seed, read_seed_file

__all__ = [
    # Main store
    "RbacStore",
    "RbacProvider",
    "RbacLiteConfig",
    "load_config",
    "CancellationToken",
    # Models
    "Role",
    "Permission",
    "RolePermission",
    # Seed files
    "SeedFile",
    "SeedResult",
    "load_seed",
    "read_seed_file",
    # Errors
    "RbacError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "CreateConflictError",
    "UpdateConflictError",
    "DeleteConflictError",
    "IntegrityViolationError",
    "AssociationNotFoundError",
    "DuplicateAssociationError",
    "OperationCancelledError",
    "SeedError",
]
