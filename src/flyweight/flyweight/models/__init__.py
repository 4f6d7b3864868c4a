# ABOUTME: Models package exports
# ABOUTME: Exports pydantic value models used across the flyweight package

from .registry import RegistryStats

__all__ = ["RegistryStats"]
