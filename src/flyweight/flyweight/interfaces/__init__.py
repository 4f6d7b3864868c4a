# ABOUTME: Interfaces package exports
# ABOUTME: Exports the abstract contracts for shared objects and their registries

from .registry import AbstractSharedObject, AbstractSharedObjectRegistry

__all__ = [
    "AbstractSharedObject",
    "AbstractSharedObjectRegistry",
]
