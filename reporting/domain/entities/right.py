"""Domain entity representing an authorization right."""

from dataclasses import dataclass


@dataclass
class Right:
    """Capability name a caller must hold to reach protected templates."""

    id: int | None
    name: str
    type: str | None = None
    description: str | None = None


__all__ = ["Right"]
