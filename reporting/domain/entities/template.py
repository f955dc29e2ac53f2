"""Domain entity representing a report template."""

from dataclasses import dataclass, field
from datetime import datetime

from .template_parameter import TemplateParameter


@dataclass
class ReportTemplate:
    """Core attributes describing an uploaded report template."""

    id: str | None
    name: str
    type: str
    description: str | None
    required_rights: list[str] = field(default_factory=list)
    data: bytes | None = None
    parameters: list[TemplateParameter] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def replace_required_rights(self, rights: list[str]) -> None:
        """Replace the required rights keeping the first occurrence of each."""

        self.required_rights.clear()
        for right in rights:
            if right not in self.required_rights:
                self.required_rights.append(right)


__all__ = ["ReportTemplate"]
