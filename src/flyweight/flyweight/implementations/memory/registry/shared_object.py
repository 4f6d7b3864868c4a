# ABOUTME: Immutable shared object bound to a canonical key
# ABOUTME: Combines intrinsic state with per-call extrinsic state without retaining the latter

import copy
from typing import Any, Callable

from flyweight.exceptions import InvalidKeyError
from flyweight.interfaces.registry import AbstractSharedObject

Writer = Callable[[str], Any]

_UNSET: Any = object()


class SharedObject(AbstractSharedObject):
    """
    Concrete shared object with immutable intrinsic state.

    The lookup key and the intrinsic payload are stored separately. When no
    payload is supplied the key itself is used, matching the simplest case
    where the key is the whole intrinsic state.

    Instances cannot be modified after construction: rebinding or deleting any
    attribute raises AttributeError. Equality and hashing are by identity, so
    two objects built from the same key are never "the same" unless they are
    the same instance.

    Immutability is shallow. The payload is held by reference, so a mutable
    payload (a list or dict returned by an intrinsic factory) can still be
    changed through `intrinsic_state`. Factories should return immutable
    values such as str, tuple or frozenset.
    """

    __slots__ = ("_key", "_intrinsic_state", "_writer")

    def __init__(self, key: str, intrinsic_state: Any = _UNSET, writer: Writer = print):
        """
        Initialize a shared object.

        Args:
            key: Canonical, non-empty key
            intrinsic_state: Immutable payload derived from the key (defaults to the key)
            writer: Callable receiving each formatted operation line

        Raises:
            InvalidKeyError: If key is None, not a string, or empty
        """
        if key is None:
            raise InvalidKeyError("Key must not be None", key=key)
        if not isinstance(key, str):
            raise InvalidKeyError(f"Key must be a string, got {type(key).__name__}", key=key)
        if not key:
            raise InvalidKeyError("Key must be a non-empty string", key=key)

        object.__setattr__(self, "_key", key)
        object.__setattr__(self, "_intrinsic_state", key if intrinsic_state is _UNSET else intrinsic_state)
        object.__setattr__(self, "_writer", writer)

    @property
    def key(self) -> str:
        return self._key

    @property
    def intrinsic_state(self) -> Any:
        return self._intrinsic_state

    def operate(self, extrinsic_state: Any) -> None:
        """
        Emit one line combining intrinsic and extrinsic state through the writer.

        Args:
            extrinsic_state: Per-call context; not stored on the object
        """
        self._writer(f"Intrinsic State: {self._intrinsic_state}, Extrinsic State: {extrinsic_state}")

    def clone(self) -> "SharedObject":
        return SharedObject(self._key, copy.copy(self._intrinsic_state), writer=self._writer)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot delete '{name}'")

    def __repr__(self) -> str:
        return f"SharedObject(key={self._key!r}, intrinsic_state={self._intrinsic_state!r})"
