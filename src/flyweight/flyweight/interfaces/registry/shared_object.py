# ABOUTME: Abstract shared object interface holding immutable intrinsic state
# ABOUTME: Defines the contract for objects that are shared by key and operated on with per-call state

from abc import ABC, abstractmethod
from typing import Any


class AbstractSharedObject(ABC):
    """
    Abstract base class for an object shared between many callers.

    A shared object is bound to a canonical key and carries intrinsic state that
    never changes after construction. Callers never own a shared object; they
    hold a non-owning reference handed out by a registry and supply extrinsic
    state on every call to `operate`.
    """

    @property
    @abstractmethod
    def key(self) -> str:
        """The canonical key this object was created for."""
        pass

    @property
    @abstractmethod
    def intrinsic_state(self) -> Any:
        """The immutable payload derived from the key at construction."""
        pass

    @abstractmethod
    def operate(self, extrinsic_state: Any) -> None:
        """
        Perform the object's operation combining intrinsic and extrinsic state.

        The extrinsic state belongs to this call only and must not be retained.
        Intrinsic state is left untouched, so the same instance may be operated
        on concurrently from several threads.

        Args:
            extrinsic_state: Caller-supplied, per-call context.
        """
        pass

    @abstractmethod
    def clone(self) -> "AbstractSharedObject":
        """
        Create a new, independent instance with copied intrinsic fields.

        The clone is not registered anywhere and is never returned by a registry
        lookup; cloning and sharing are separate concerns.

        Returns:
            AbstractSharedObject: A distinct instance equal in key and intrinsic state.
        """
        pass
