"""
Shared CRUD logic for roles and permissions.

Roles and permissions have the same shape and the same lifecycle, so both
managers are thin subclasses of NamedEntityManager.
"""

from typing import Generic, Optional, Type, TypeVar, Union
from uuid import UUID

from ..cancellation import CancellationToken, check_cancelled
from ..errors import (
    CreateConflictError,
    DeleteConflictError,
    InvalidArgumentError,
    NotFoundError,
    UpdateConflictError,
)
from ..storage import ConcurrentMap
from ..utils import IdFactory, new_id, not_default, not_null, resolve_id
from .models import NamedEntity

E = TypeVar("E", bound=NamedEntity)


class NamedEntityManager(Generic[E]):
    """
    CRUD operations over one map of named entities.

    Records are stored as private copies: every value handed in is copied
    before it is stored, and every value handed out is a copy of what is
    stored.

    Subclasses set:
        model: Pydantic model class stored by the manager
        entity_name: Name used in error messages ("Role")
        argument_name: Name used for argument errors ("role")
    """

    model: Type[E]
    entity_name: str = "Entity"
    argument_name: str = "entity"

    def __init__(self, id_factory: IdFactory = new_id) -> None:
        """
        Initialize the manager with an empty map.

        Args:
            id_factory: Callable producing identifiers for new records
        """
        self._id_factory = id_factory
        self._items: ConcurrentMap[UUID, E] = ConcurrentMap()

    def __len__(self) -> int:
        return len(self._items)

    async def create(
        self,
        system_name: str,
        display_name: str,
        description: Optional[str] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> E:
        """
        Create a new record under a freshly generated identifier.

        Args:
            system_name: Machine key, must be non-empty
            display_name: Human-readable name, must be non-empty
            description: Optional free text
            cancellation: Optional token checked before any work

        Returns:
            The created record

        Raises:
            InvalidArgumentError: If a name is None or empty
            CreateConflictError: If the generated identifier is already taken
            OperationCancelledError: If the token was already cancelled
        """
        check_cancelled(cancellation)
        not_null(system_name, "system_name")
        not_null(display_name, "display_name")

        record = self.model(
            id=self._id_factory(),
            system_name=system_name,
            display_name=display_name,
            description=description,
        )
        if not self._items.try_add(record.id, record):
            raise CreateConflictError(self.entity_name, record.id, system_name)

        return record.model_copy()

    async def update(
        self,
        record: E,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> E:
        """
        Replace a stored record wholesale.

        Reads the current record and swaps in the new one only if the map
        still holds what was read. There is no retry: a concurrent writer
        makes this call fail with UpdateConflictError.

        Raises:
            InvalidArgumentError: If record is None, of the wrong type, or has a nil id
            NotFoundError: If no record exists under record.id
            UpdateConflictError: If the record changed between read and swap
        """
        check_cancelled(cancellation)
        not_null(record, self.argument_name)
        if not isinstance(record, self.model):
            raise InvalidArgumentError(
                self.argument_name,
                f"Argument '{self.argument_name}' must be a {self.model.__name__}",
            )
        entity_id = not_default(record.id, f"{self.argument_name}.id")
        not_null(record.system_name, f"{self.argument_name}.system_name")
        not_null(record.display_name, f"{self.argument_name}.display_name")

        existing = self._fetch(entity_id)
        replacement = record.model_copy()
        if not self._items.try_update(entity_id, replacement, existing):
            raise UpdateConflictError(self.entity_name, entity_id)

        return replacement.model_copy()

    async def delete(
        self,
        record_or_id: Union[E, UUID],
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> None:
        """
        Delete a record by identifier or by record.

        Not idempotent: deleting a missing record raises NotFoundError.
        Associations that reference the record are left in place.

        Raises:
            InvalidArgumentError: If the argument is None or resolves to a nil id
            NotFoundError: If the record is absent, or vanished before removal
            DeleteConflictError: If the record was replaced before removal
        """
        check_cancelled(cancellation)
        entity_id = resolve_id(record_or_id, self.argument_name)

        existing = self._fetch(entity_id)
        if not self._items.try_remove(entity_id, existing):
            if entity_id in self._items:
                raise DeleteConflictError(self.entity_name, entity_id)
            raise NotFoundError(self.entity_name, entity_id)

    async def get(
        self,
        entity_id: UUID,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> E:
        """
        Get a record by identifier.

        Raises:
            NotFoundError: If no record exists under the identifier
        """
        check_cancelled(cancellation)
        not_default(entity_id, "id")
        return self._fetch(entity_id).model_copy()

    async def exists(
        self,
        entity_id: UUID,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> bool:
        """
        Check whether a record exists.

        Unlike get(), absence is reported as False, never as an error.
        """
        check_cancelled(cancellation)
        not_default(entity_id, "id")
        return self._items.contains(entity_id)

    def _fetch(self, entity_id: UUID) -> E:
        """Return the stored record itself (not a copy)."""
        record = self._items.try_get(entity_id)
        if record is None:
            raise NotFoundError(self.entity_name, entity_id)
        return record
