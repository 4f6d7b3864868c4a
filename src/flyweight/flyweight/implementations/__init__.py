# ABOUTME: Implementations package exports
# ABOUTME: Contains concrete implementations of the flyweight interfaces

"""
Flyweight Implementations

This module contains concrete implementations of the registry interfaces.
"""

from .memory import InMemorySharedObjectRegistry, SharedObject

__all__ = [
    "InMemorySharedObjectRegistry",
    "SharedObject",
]
