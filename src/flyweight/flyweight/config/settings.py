# ABOUTME: Main configuration composition for the flyweight package
# ABOUTME: Adds registry options on top of the base settings and exposes a cached accessor

from functools import lru_cache

from pydantic import Field

from ._base import BaseFlyweightSettings


class FlyweightSettings(BaseFlyweightSettings):
    """Represents the complete, composed configuration for the registry.

    Inherits the foundational settings from `BaseFlyweightSettings` and adds
    the options consumed by `InMemorySharedObjectRegistry.from_settings`.

    Attributes:
        REGISTRY_STRIP_KEYS: Strip surrounding whitespace from keys before lookup.
        REGISTRY_MAX_KEY_LENGTH: Longest key the registry accepts.
    """

    REGISTRY_STRIP_KEYS: bool = Field(
        default=False,
        description="Canonicalize keys by stripping surrounding whitespace before lookup.",
    )
    REGISTRY_MAX_KEY_LENGTH: int = Field(
        default=256,
        gt=0,
        description="Maximum accepted key length; longer keys are rejected as invalid.",
    )


@lru_cache
def get_settings() -> FlyweightSettings:
    """Provides a cached instance of the package settings.

    The settings object is instantiated only once, so environment variables and
    `.env` files are read a single time. Registries are still constructed
    explicitly by their owner; only the configuration is cached here.

    Returns:
        A single, cached instance of FlyweightSettings.
    """
    return FlyweightSettings()
