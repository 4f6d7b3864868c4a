# ABOUTME: Registry interfaces package exports
# ABOUTME: Exports abstract classes for shared objects and the keyed registry that owns them

from .shared_object import AbstractSharedObject
from .registry import AbstractSharedObjectRegistry

__all__ = [
    "AbstractSharedObject",
    "AbstractSharedObjectRegistry",
]
