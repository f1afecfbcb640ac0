"""
Argument guards shared by every store operation.
"""

from typing import Any, Optional, TypeVar
from uuid import UUID

from ..errors import InvalidArgumentError

T = TypeVar("T")

NIL_UUID = UUID(int=0)


def not_null(value: Optional[T], name: str) -> T:
    """
    Reject None, and empty or blank strings.

    Args:
        value: Value to check
        name: Argument name reported in the error

    Returns:
        The value unchanged

    Raises:
        InvalidArgumentError: If the value is None or an empty string
    """
    if value is None:
        raise InvalidArgumentError(name, f"Argument '{name}' must not be None")
    if isinstance(value, str) and not value.strip():
        raise InvalidArgumentError(name, f"Argument '{name}' must not be empty")
    return value


def not_default(value: Optional[UUID], name: str) -> UUID:
    """
    Reject None and the nil UUID.

    Raises:
        InvalidArgumentError: If the identifier is None, nil, or not a UUID
    """
    if value is None:
        raise InvalidArgumentError(name, f"Argument '{name}' must not be None")
    if not isinstance(value, UUID):
        raise InvalidArgumentError(name, f"Argument '{name}' must be a UUID, got {type(value).__name__}")
    if value == NIL_UUID:
        raise InvalidArgumentError(name, f"Argument '{name}' must not be the nil UUID")
    return value


def resolve_id(value: Any, name: str) -> UUID:
    """Accept either a UUID or a record carrying an ``id`` and return the id."""
    not_null(value, name)
    if isinstance(value, UUID):
        return not_default(value, name)
    return not_default(getattr(value, "id", None), f"{name}.id")
