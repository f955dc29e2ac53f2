"""Domain entities exposed by the application."""

from .compiled_report import CompiledReport, ReportField, ReportParameter
from .principal import Principal
from .right import Right
from .template import ReportTemplate
from .template_parameter import ParameterDependency, TemplateParameter

__all__ = [
    "CompiledReport",
    "ParameterDependency",
    "Principal",
    "ReportField",
    "ReportParameter",
    "ReportTemplate",
    "Right",
    "TemplateParameter",
]
