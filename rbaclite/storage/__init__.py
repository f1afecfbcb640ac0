"""In-memory storage primitives."""

from .concurrent_map import ConcurrentMap

__all__ = ["ConcurrentMap"]
