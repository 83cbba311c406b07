"""Metrics collection for configuration stores."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class StoreMetrics:
    """Counters for configuration store activity.

    Attributes:
        properties_seeded: Entries created at store construction.
        properties_added: Entries created by writes to unknown properties.
        writes_applied: Successful single-property writes.
        writes_rejected: Single-property writes that raised.
        resets_applied: Properties restored to their default.
    """

    properties_seeded: int = 0
    properties_added: int = 0
    writes_applied: int = 0
    writes_rejected: int = 0
    resets_applied: int = 0

    _instance: ClassVar["StoreMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "StoreMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_seeded(self, count: int) -> None:
        """Record entries created at construction.

        Args:
            count: Number of entries.
        """
        self.properties_seeded += count

    def record_added(self) -> None:
        """Record an entry created by a write."""
        self.properties_added += 1

    def record_write(self) -> None:
        """Record a successful write."""
        self.writes_applied += 1

    def record_rejected(self) -> None:
        """Record a rejected write."""
        self.writes_rejected += 1

    def record_reset(self) -> None:
        """Record a property reset to its default."""
        self.resets_applied += 1

    def to_dict(self) -> dict[str, int]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "properties_seeded": self.properties_seeded,
            "properties_added": self.properties_added,
            "writes_applied": self.writes_applied,
            "writes_rejected": self.writes_rejected,
            "resets_applied": self.resets_applied,
        }
