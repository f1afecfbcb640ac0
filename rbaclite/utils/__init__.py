"""Shared helpers for identifier generation and argument checks."""

from .guards import NIL_UUID, not_default, not_null, resolve_id
from .ids import IdFactory, new_id

__all__ = [
    "NIL_UUID",
    "IdFactory",
    "new_id",
    "not_default",
    "not_null",
    "resolve_id",
]
