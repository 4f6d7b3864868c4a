# ABOUTME: Exceptions package exports
# ABOUTME: Exports the exception hierarchy used by the registry and its configuration

from flyweight.exceptions.base import (
    FlyweightException,
    ValidationException,
    InvalidKeyError,
    ConfigurationException,
)

__all__ = [
    "FlyweightException",
    "ValidationException",
    "InvalidKeyError",
    "ConfigurationException",
]
