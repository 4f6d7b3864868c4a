# ABOUTME: RegistryStats model describing a point-in-time view of a shared-object registry
# ABOUTME: Tracks entry count, lookup hits and misses, and rejected keys

from pydantic import BaseModel, ConfigDict, Field, computed_field


class RegistryStats(BaseModel):
    """
    Snapshot of shared-object registry counters.

    `misses` counts lookups that created a new entry, so on a registry that
    never rejects keys `size == misses` always holds. `rejected` counts keys
    refused with InvalidKeyError; those never create entries.
    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(default=0, ge=0, description="Number of distinct shared objects held")
    hits: int = Field(default=0, ge=0, description="Lookups answered by an existing entry")
    misses: int = Field(default=0, ge=0, description="Lookups that created a new entry")
    rejected: int = Field(default=0, ge=0, description="Lookups refused because the key was invalid")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hit_ratio(self) -> float:
        """Fraction of successful get-or-create lookups served from the registry."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total
