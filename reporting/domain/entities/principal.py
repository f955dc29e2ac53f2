"""Domain entity representing the authenticated caller."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Principal:
    """Caller identity together with the rights granted to it."""

    subject: str
    rights: frozenset[str] = field(default_factory=frozenset)

    def has_right(self, name: str) -> bool:
        return name in self.rights


__all__ = ["Principal"]
