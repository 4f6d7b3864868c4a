# ABOUTME: In-memory implementations package
# ABOUTME: Thread-safe, process-local implementations built on the standard library

from .registry.shared_object import SharedObject
from .registry.registry import InMemorySharedObjectRegistry

__all__ = [
    "SharedObject",
    "InMemorySharedObjectRegistry",
]
