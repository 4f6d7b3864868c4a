# ABOUTME: Abstract registry interface for get-or-create access to shared objects
# ABOUTME: Defines the single-instance-per-key contract that every registry must honor

from abc import ABC, abstractmethod
from typing import List

from flyweight.exceptions import InvalidKeyError
from flyweight.interfaces.registry.shared_object import AbstractSharedObject
from flyweight.models.registry import RegistryStats


class AbstractSharedObjectRegistry(ABC):
    """
    Abstract base class for a keyed store of shared objects.

    A registry exclusively owns its mapping and every object it creates. For any
    key, at most one object exists in the mapping, and every lookup after the
    first creation returns that same instance (identity, not value equality).
    Entries move one way only, from absent to present; there is no eviction.
    """

    @abstractmethod
    def get_or_create(self, key: str) -> AbstractSharedObject:
        """
        Return the object bound to `key`, creating and registering it if absent.

        Args:
            key: Non-null, non-empty canonical key.

        Returns:
            AbstractSharedObject: The single shared instance for `key`.

        Raises:
            InvalidKeyError: If the key is null, empty, or otherwise rejected.
                No entry is created in that case.
        """
        pass

    @abstractmethod
    def get(self, key: str) -> AbstractSharedObject | None:
        """
        Return the object bound to `key` without creating one.

        Args:
            key: Non-null, non-empty canonical key.

        Returns:
            The shared instance, or None if the key has not been requested yet.

        Raises:
            InvalidKeyError: If the key is null, empty, or otherwise rejected.
        """
        pass

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Check whether an object has already been created for `key`."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """Return a snapshot of the canonical keys currently registered."""
        pass

    @abstractmethod
    def get_stats(self) -> RegistryStats:
        """Return a point-in-time snapshot of registry counters."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of distinct shared objects held by the registry."""
        pass

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        try:
            return self.contains(key)
        except InvalidKeyError:
            return False
