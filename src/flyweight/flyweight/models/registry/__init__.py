# ABOUTME: Registry models package exports
# ABOUTME: Exports value models that describe registry state

from .registry_stats import RegistryStats

__all__ = ["RegistryStats"]
