# ABOUTME: Memory implementations for registry interfaces
# ABOUTME: Provides the shared object and the lock-guarded registry that owns it

from .shared_object import SharedObject
from .registry import InMemorySharedObjectRegistry

__all__ = [
    "SharedObject",
    "InMemorySharedObjectRegistry",
]
