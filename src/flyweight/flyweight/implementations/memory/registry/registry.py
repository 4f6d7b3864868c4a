# ABOUTME: In-memory implementation of AbstractSharedObjectRegistry
# ABOUTME: Provides thread-safe get-or-create access guaranteeing one instance per canonical key

import threading
from typing import Any, Callable, Dict, List, Optional, Set

from loguru import logger

from flyweight.config.settings import FlyweightSettings, get_settings
from flyweight.exceptions import ConfigurationException, InvalidKeyError
from flyweight.interfaces.registry import AbstractSharedObjectRegistry
from flyweight.models.registry import RegistryStats
from .shared_object import SharedObject, Writer

IntrinsicFactory = Callable[[str], Any]


class InMemorySharedObjectRegistry(AbstractSharedObjectRegistry):
    """
    In-memory implementation of AbstractSharedObjectRegistry.

    The registry keeps a dictionary from canonical key to SharedObject. The
    check-then-insert sequence in `get_or_create` runs under a single lock, so
    concurrent callers asking for the same new key all receive the one
    instance created by whichever caller got there first.

    Features:
    - Identity-preserving get-or-create lookups
    - Optional factory deriving intrinsic state from the key
    - Optional key canonicalization (whitespace stripping) and length limit
    - Hit, miss, and rejection counters
    - Thread-safe operations

    Entries are never removed. The registry lives as long as its owner keeps a
    reference to it; there is no process-wide default instance.
    """

    def __init__(
        self,
        intrinsic_factory: Optional[IntrinsicFactory] = None,
        writer: Writer = print,
        strip_keys: bool = False,
        max_key_length: int = 256,
    ):
        """
        Initialize the in-memory registry.

        Args:
            intrinsic_factory: Callable deriving intrinsic state from a key (defaults to the key itself)
            writer: Callable handed to each created object to receive operation output
            strip_keys: Strip surrounding whitespace from keys before lookup
            max_key_length: Longest accepted key; longer keys are rejected

        Raises:
            ConfigurationException: If an option is invalid
        """
        if intrinsic_factory is not None and not callable(intrinsic_factory):
            raise ConfigurationException("intrinsic_factory must be callable", code="INVALID_FACTORY")
        if not callable(writer):
            raise ConfigurationException("writer must be callable", code="INVALID_WRITER")
        if isinstance(max_key_length, bool) or not isinstance(max_key_length, int) or max_key_length <= 0:
            raise ConfigurationException(
                "max_key_length must be a positive integer",
                code="INVALID_MAX_KEY_LENGTH",
                details={"max_key_length": max_key_length},
            )

        self.intrinsic_factory = intrinsic_factory
        self.writer = writer
        self.strip_keys = strip_keys
        self.max_key_length = max_key_length

        self._objects: Dict[str, SharedObject] = {}
        # Reentrant so a factory may look up other keys on the same registry
        self._lock = threading.RLock()
        # Keys whose factory call is in progress; only the lock holder sees these
        self._creating: Set[str] = set()

        self._hits = 0
        self._misses = 0
        self._rejected = 0

    @classmethod
    def from_settings(
        cls,
        settings: Optional[FlyweightSettings] = None,
        intrinsic_factory: Optional[IntrinsicFactory] = None,
        writer: Writer = print,
    ) -> "InMemorySharedObjectRegistry":
        """
        Build a registry using key options from FlyweightSettings.

        Args:
            settings: Settings to read (defaults to the cached get_settings())
            intrinsic_factory: Callable deriving intrinsic state from a key
            writer: Callable receiving operation output

        Returns:
            A new, empty registry
        """
        settings = settings or get_settings()
        return cls(
            intrinsic_factory=intrinsic_factory,
            writer=writer,
            strip_keys=settings.REGISTRY_STRIP_KEYS,
            max_key_length=settings.REGISTRY_MAX_KEY_LENGTH,
        )

    def _canonicalize(self, key: Any) -> str:
        """Validate a caller key and return its canonical form."""
        reason: str | None = None

        if key is None:
            reason = "Key must not be None"
        elif not isinstance(key, str):
            reason = f"Key must be a string, got {type(key).__name__}"
        else:
            if self.strip_keys:
                key = key.strip()
            if not key:
                reason = "Key must be a non-empty string"
            elif len(key) > self.max_key_length:
                reason = f"Key length {len(key)} exceeds maximum of {self.max_key_length}"

        if reason is not None:
            with self._lock:
                self._rejected += 1
            logger.warning(f"Rejected registry key {key!r}: {reason}")
            raise InvalidKeyError(reason, key=key)

        return key

    def get_or_create(self, key: str) -> SharedObject:
        """
        Return the object bound to `key`, creating and registering it if absent.

        Args:
            key: Non-null, non-empty canonical key

        Returns:
            The single shared instance for the canonical form of `key`

        Raises:
            InvalidKeyError: If the key is rejected; no entry is created
            ConfigurationException: If the intrinsic factory requests the key it is building
        """
        canonical = self._canonicalize(key)

        with self._lock:
            existing = self._objects.get(canonical)
            if existing is not None:
                self._hits += 1
                return existing

            if self.intrinsic_factory is None:
                shared = SharedObject(canonical, writer=self.writer)
            else:
                if canonical in self._creating:
                    raise ConfigurationException(
                        f"Intrinsic factory re-entered get_or_create for its own key {canonical!r}",
                        code="RECURSIVE_FACTORY",
                        details={"key": canonical},
                    )

                self._creating.add(canonical)
                try:
                    intrinsic_state = self.intrinsic_factory(canonical)
                except Exception as e:
                    logger.error(f"Intrinsic factory failed for key {canonical!r}: {e}")
                    raise
                finally:
                    self._creating.discard(canonical)
                shared = SharedObject(canonical, intrinsic_state, writer=self.writer)

            self._objects[canonical] = shared
            self._misses += 1
            size = len(self._objects)

        logger.debug(f"Created shared object for key {canonical!r} (registry size: {size})")
        return shared

    def get(self, key: str) -> SharedObject | None:
        canonical = self._canonicalize(key)
        with self._lock:
            return self._objects.get(canonical)

    def contains(self, key: str) -> bool:
        canonical = self._canonicalize(key)
        with self._lock:
            return canonical in self._objects

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._objects.keys())

    def get_stats(self) -> RegistryStats:
        with self._lock:
            return RegistryStats(
                size=len(self._objects),
                hits=self._hits,
                misses=self._misses,
                rejected=self._rejected,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._objects)

    def __repr__(self) -> str:
        return f"InMemorySharedObjectRegistry(size={len(self)}, strip_keys={self.strip_keys})"
