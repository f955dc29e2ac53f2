"""Domain entities describing the inputs a report template declares."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParameterDependency:
    """Link between a parameter and another parameter it depends on.

    ``dependency`` names the parameter whose selected value drives this one,
    ``property`` is the attribute read from that value and ``placeholder`` is
    the token of ``select_expression`` that receives it.
    """

    dependency: str
    property: str
    placeholder: str


@dataclass
class TemplateParameter:
    """Core attributes describing a user-facing report parameter."""

    name: str
    display_name: str
    description: str | None = None
    data_type: str | None = None
    select_expression: str | None = None
    select_property: str | None = None
    display_property: str | None = None
    required: bool = False
    default_value: str | None = None
    options: list[str] = field(default_factory=list)
    dependencies: list[ParameterDependency] = field(default_factory=list)
    id: int | None = None


__all__ = ["ParameterDependency", "TemplateParameter"]
