"""Identifier generation."""

from typing import Callable
from uuid import UUID, uuid4

IdFactory = Callable[[], UUID]


def new_id() -> UUID:
    """Return a fresh random (version 4) UUID."""
    return uuid4()
