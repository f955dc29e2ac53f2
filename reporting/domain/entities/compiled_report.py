"""In-memory form of a compiled report definition."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReportParameter:
    """Parameter entry of a compiled report's parameter table."""

    name: str
    value_class_name: str | None = None
    system_defined: bool = False
    for_prompting: bool = True
    description: str | None = None
    default_value_expression: str | None = None
    properties: dict[str, str] = field(default_factory=dict)

    def get_property(self, key: str) -> str | None:
        return self.properties.get(key)


@dataclass(frozen=True)
class ReportField:
    """Data field read from the report's data source."""

    name: str
    value_class_name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class CompiledReport:
    """Validated report definition produced by the report compiler."""

    name: str
    language: str | None = None
    properties: dict[str, str] = field(default_factory=dict)
    parameters: tuple[ReportParameter, ...] = ()
    fields: tuple[ReportField, ...] = ()
    query_text: str | None = None
    query_language: str | None = None

    def get_property(self, key: str) -> str | None:
        """Return the report-level property ``key`` or ``None`` when absent."""

        return self.properties.get(key)


__all__ = ["CompiledReport", "ReportField", "ReportParameter"]
