"""ORM models used by the application infrastructure."""

from .right import RightModel
from .template import ReportTemplateModel
from .template_parameter import ParameterDependencyModel, TemplateParameterModel

__all__ = [
    "ParameterDependencyModel",
    "ReportTemplateModel",
    "RightModel",
    "TemplateParameterModel",
]
