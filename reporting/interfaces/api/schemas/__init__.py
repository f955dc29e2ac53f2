"""Pydantic schemas exposed by the HTTP API."""

from .template import (
    ParameterDependencyRead,
    TemplateParameterRead,
    TemplateParameterValues,
    TemplateRead,
)

__all__ = [
    "ParameterDependencyRead",
    "TemplateParameterRead",
    "TemplateParameterValues",
    "TemplateRead",
]
