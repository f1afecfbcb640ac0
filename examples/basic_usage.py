"""
Basic rbaclite usage example.

This example demonstrates the core features of rbaclite:
- Role and permission management
- Associating permissions with roles
- Handling update conflicts and cancellation

Run with:
    python examples/basic_usage.py
"""

import asyncio

from rbaclite import (
    CancellationToken,
    DuplicateAssociationError,
    NotFoundError,
    OperationCancelledError,
    RbacStore,
    UpdateConflictError,
)


async def main():
    store = RbacStore()

    # =================================================================
    # 1. Create Roles and Permissions
    # =================================================================
    print("Creating roles and permissions...")

    admin = await store.create_role("admin", "Administrator", "Full access")
    viewer = await store.create_role("viewer", "Viewer")
    print(f"  Created role: {admin.system_name} (ID: {admin.id})")
    print(f"  Created role: {viewer.system_name} (ID: {viewer.id})")

    read = await store.create_permission("posts.read", "Read posts")
    write = await store.create_permission("posts.write", "Write posts")
    print(f"  Created permission: {read.system_name}")
    print(f"  Created permission: {write.system_name}")

    # =================================================================
    # 2. Associate Permissions with Roles
    # =================================================================
    print("\nGranting permissions...")

    for role, permission in ((admin, read), (admin, write), (viewer, read)):
        link = await store.create_permission_to_role_association(role, permission)
        print(f"  {role.system_name} -> {permission.system_name} (ID: {link.id})")

    # =================================================================
    # 3. Update a Role (retry on conflict)
    # =================================================================
    print("\nUpdating role...")

    for _ in range(3):
        current = await store.get_role(viewer.id)
        current.display_name = "Read-only user"
        try:
            viewer = await store.update_role(current)
            break
        except UpdateConflictError:
            continue
    print(f"  {viewer.system_name} is now '{viewer.display_name}'")

    # =================================================================
    # 4. Duplicate associations are reported on delete
    # =================================================================
    print("\nRevoking permissions...")

    await store.create_permission_to_role_association(viewer, read)
    try:
        await store.delete_role_to_permission_association(viewer, read)
    except DuplicateAssociationError as e:
        print(f"  {e}")

    await store.delete_role_to_permission_association(admin, write)
    print(f"  Revoked {write.system_name} from {admin.system_name}")

    # =================================================================
    # 5. Delete and Cancellation
    # =================================================================
    print("\nDeleting role...")

    await store.delete_role(admin)
    print(f"  Role exists: {await store.exists_role(admin.id)}")
    try:
        await store.get_role(admin.id)
    except NotFoundError as e:
        print(f"  {e}")

    try:
        await store.create_role("late", "Late", cancellation=CancellationToken.cancelled())
    except OperationCancelledError as e:
        print(f"  {e}")


if __name__ == "__main__":
    asyncio.run(main())
