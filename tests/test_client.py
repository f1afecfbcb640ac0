"""
Tests for rbaclite.client module.
"""

import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from uuid import uuid4

import pytest

from rbaclite import RbacProvider, RbacStore
from rbaclite.cancellation import CancellationToken
from rbaclite.config import RbacLiteConfig
from rbaclite.errors import (
    AssociationNotFoundError,
    NotFoundError,
    OperationCancelledError,
    UpdateConflictError,
)


class TestRbacStore:
    """Tests for RbacStore class."""

    def test_store_initialization(self, rbaclite_config):
        """Test store initialization."""
        store = RbacStore(config=rbaclite_config)

        assert store.config == rbaclite_config
        assert store.roles is not None
        assert store.permissions is not None
        assert store.associations is not None
        assert len(store.roles) == 0

    def test_stores_do_not_share_state(self):
        """Test that each store owns its own maps."""
        first = RbacStore()
        second = RbacStore()

        asyncio.run(first.create_role("admin", "Administrator"))

        assert len(first.roles) == 1
        assert len(second.roles) == 0

    def test_store_implements_provider(self, store):
        """Test that the store satisfies the provider contract."""
        assert isinstance(store, RbacProvider)

    @pytest.mark.asyncio
    async def test_create_classmethod(self, monkeypatch):
        """Test creating a store with environment configuration."""
        monkeypatch.setenv("RBACLITE_DEBUG", "true")

        store = await RbacStore.create()

        assert isinstance(store.config, RbacLiteConfig)
        assert store.config.debug is True

    @pytest.mark.asyncio
    async def test_role_example_flow(self, store):
        """Test create, get and delete of a role through the store."""
        role = await store.create_role("admin", "Administrator", None)

        assert role.system_name == "admin"
        assert role.display_name == "Administrator"
        assert role.description is None
        assert await store.get_role(role.id) == role
        assert await store.exists_role(role.id) is True

        await store.delete_role(role.id)

        with pytest.raises(NotFoundError):
            await store.get_role(role.id)
        assert await store.exists_role(role.id) is False

    @pytest.mark.asyncio
    async def test_update_role_through_store(self, store):
        """Test updating a role through the store."""
        role = await store.create_role("admin", "Administrator")
        role.description = "Everything"

        updated = await store.update_role(role)

        assert updated == role
        assert (await store.get_role(role.id)).description == "Everything"

    @pytest.mark.asyncio
    async def test_permission_flow(self, store):
        """Test the permission operations through the store."""
        permission = await store.create_permission("posts.write", "Write posts")
        permission.display_name = "Write"
        await store.update_permission(permission)

        assert (await store.get_permission(permission.id)).display_name == "Write"
        assert await store.exists_permission(permission.id) is True

        await store.delete_permission(permission)
        assert await store.exists_permission(permission.id) is False

    @pytest.mark.asyncio
    async def test_association_flow(self, store):
        """Test the association operations through the store."""
        role = await store.create_role("admin", "Administrator")
        permission = await store.create_permission("posts.write", "Write posts")

        link = await store.create_permission_to_role_association(role, permission)
        assert await store.get_role_to_permission_association(link.id) == link

        await store.delete_role_to_permission_association(role.id, permission.id)

        with pytest.raises(NotFoundError):
            await store.get_role_to_permission_association(link.id)
        with pytest.raises(AssociationNotFoundError):
            await store.delete_role_to_permission_association(role, permission)

    @pytest.mark.asyncio
    async def test_association_to_missing_entities(self, store):
        """Test that associations are not checked against roles or permissions."""
        link = await store.create_permission_to_role_association(uuid4(), uuid4())

        assert await store.exists_role(link.role_id) is False
        assert await store.exists_permission(link.permission_id) is False

    @pytest.mark.asyncio
    async def test_delete_role_keeps_associations(self, store):
        """Test that deleting a role does not cascade."""
        role = await store.create_role("admin", "Administrator")
        permission = await store.create_permission("posts.write", "Write posts")
        link = await store.create_permission_to_role_association(role, permission)

        await store.delete_role(role)
        await store.delete_permission(permission)

        assert await store.get_role_to_permission_association(link.id) == link

    @pytest.mark.asyncio
    async def test_expired_timeout_cancels(self, store):
        """Test that an expired deadline behaves like cancellation."""
        token = CancellationToken(timeout=0)

        with pytest.raises(OperationCancelledError):
            await store.create_role("admin", "Administrator", cancellation=token)

        assert len(store.roles) == 0


class TestRbacStoreConcurrency:
    """Concurrency tests for RbacStore."""

    @pytest.mark.asyncio
    async def test_parallel_creates_in_tasks(self, store):
        """Test that concurrent tasks all get distinct roles."""
        roles = await asyncio.gather(
            *(store.create_role(f"role-{i}", f"Role {i}") for i in range(200))
        )

        assert len({role.id for role in roles}) == 200
        assert len(store.roles) == 200

    def test_parallel_creates_in_threads(self, store):
        """Test that concurrent threads all get distinct roles."""
        count = 100

        def create(i):
            return asyncio.run(store.create_role(f"role-{i}", f"Role {i}"))

        with ThreadPoolExecutor(max_workers=16) as pool:
            roles = list(pool.map(create, range(count)))

        assert len({role.id for role in roles}) == count
        assert len(store.roles) == count

    def test_racing_updates_never_mix(self, store):
        """Test that racing updates end on exactly one submitted value."""
        role = asyncio.run(store.create_role("admin", "Administrator", "original"))
        workers = 8
        barrier = threading.Barrier(workers)
        succeeded = []
        conflicts = []
        lock = threading.Lock()

        def update(i):
            submitted = role.model_copy(
                update={"display_name": f"Name {i}", "description": f"Description {i}"}
            )
            barrier.wait()
            try:
                asyncio.run(store.update_role(submitted))
            except UpdateConflictError:
                with lock:
                    conflicts.append(i)
            else:
                with lock:
                    succeeded.append(i)

        threads = [threading.Thread(target=update, args=(i,)) for i in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Every thread either won its swap or saw the conflict; nothing is lost.
        assert len(succeeded) + len(conflicts) == workers
        assert sorted(succeeded + conflicts) == list(range(workers))
        assert succeeded
        # More than one success means those updates ran one after another,
        # each reading the previous winner. Of two overlapping updates only
        # one can win the swap.

        stored = asyncio.run(store.get_role(role.id))
        winners = {(f"Name {i}", f"Description {i}") for i in succeeded}
        assert (stored.display_name, stored.description) in winners
        assert stored.system_name == "admin"
