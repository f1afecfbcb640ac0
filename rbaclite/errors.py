"""
rbaclite exceptions.

Every error raised by the store derives from RbacError, so callers can
catch the whole family at once or pick out a single condition.
"""

from typing import Any, Optional


class RbacError(Exception):
    """Base class for all rbaclite errors."""


class InvalidArgumentError(RbacError, ValueError):
    """A None/empty string or a nil identifier was passed to an operation."""

    def __init__(self, name: str, message: Optional[str] = None) -> None:
        self.name = name
        super().__init__(message or f"Argument '{name}' is invalid")


class NotFoundError(RbacError, LookupError):
    """The targeted identifier is not present in the store."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ConflictError(RbacError):
    """A write lost against the current state of the store."""

    def __init__(self, entity: str, entity_id: Any, message: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message)


class CreateConflictError(ConflictError):
    """A freshly generated identifier is already taken."""

    def __init__(self, entity: str, entity_id: Any, label: str) -> None:
        super().__init__(entity, entity_id, f"Create {entity.lower()} {label} failed: id {entity_id} is taken")


class UpdateConflictError(ConflictError):
    """The record changed between the read and the conditional replace."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(entity, entity_id, f"Update {entity.lower()} {entity_id} failed: record changed concurrently")


class DeleteConflictError(ConflictError):
    """The record was replaced between the lookup and the removal."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(entity, entity_id, f"Delete {entity.lower()} {entity_id} failed: record changed concurrently")


class IntegrityViolationError(RbacError):
    """Stored associations do not match the expected one-per-pair shape."""

    def __init__(self, role_id: Any, permission_id: Any, message: str) -> None:
        self.role_id = role_id
        self.permission_id = permission_id
        super().__init__(message)


class AssociationNotFoundError(IntegrityViolationError):
    """No association links the given role and permission."""

    def __init__(self, role_id: Any, permission_id: Any) -> None:
        super().__init__(
            role_id,
            permission_id,
            f"No association between role {role_id} and permission {permission_id}",
        )


class DuplicateAssociationError(IntegrityViolationError):
    """More than one association links the given role and permission."""

    def __init__(self, role_id: Any, permission_id: Any, count: int) -> None:
        self.count = count
        super().__init__(
            role_id,
            permission_id,
            f"Found {count} associations between role {role_id} and permission {permission_id}, expected one",
        )


class OperationCancelledError(RbacError):
    """The operation's cancellation token was triggered before it started."""

    def __init__(self, message: str = "Operation was cancelled") -> None:
        super().__init__(message)


class SeedError(RbacError):
    """A seed file references roles or permissions it does not declare."""
