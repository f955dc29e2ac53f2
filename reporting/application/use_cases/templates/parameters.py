"""Build template parameters from a compiled report's parameter table."""

from __future__ import annotations

import logging

from reporting.domain.entities import CompiledReport, ReportParameter, TemplateParameter
from reporting.domain.exceptions import ReportingError
from reporting.domain.messages import (
    ERROR_REPORTING_PARAMETER_INCORRECT_TYPE,
    ERROR_REPORTING_PARAMETER_MALFORMED_DEPENDENCY,
    ERROR_REPORTING_PARAMETER_MISSING,
)
from reporting.domain.parameter_types import is_supported_parameter_type

from .list_properties import MalformedDependencyError, parse_dependencies, split_list_property

logger = logging.getLogger(__name__)

DISPLAY_NAME_PROPERTY = "displayName"
SELECT_EXPRESSION_PROPERTY = "selectExpression"
SELECT_PROPERTY_PROPERTY = "selectProperty"
DISPLAY_PROPERTY_PROPERTY = "displayProperty"
REQUIRED_PROPERTY = "required"
OPTIONS_PROPERTY = "options"
DEPENDENCIES_PROPERTY = "dependencies"


def is_user_parameter(parameter: ReportParameter) -> bool:
    """Return ``True`` for parameters a report requester must be prompted for."""

    return not parameter.system_defined and parameter.for_prompting


def create_parameter(parameter: ReportParameter) -> TemplateParameter:
    """Create the template parameter described by ``parameter``.

    Raises:
        ReportingError: If the display name is missing, the value type is not
            supported or a dependency entry is malformed.
    """

    display_name = parameter.get_property(DISPLAY_NAME_PROPERTY)
    if display_name is None or not display_name.strip():
        raise ReportingError(ERROR_REPORTING_PARAMETER_MISSING, DISPLAY_NAME_PROPERTY)

    data_type = parameter.value_class_name
    if data_type is not None and data_type.strip():
        if not is_supported_parameter_type(data_type):
            raise ReportingError(
                ERROR_REPORTING_PARAMETER_INCORRECT_TYPE, parameter.name, data_type
            )

    template_parameter = TemplateParameter(
        name=parameter.name,
        display_name=display_name,
        description=parameter.description,
        data_type=data_type,
        select_expression=parameter.get_property(SELECT_EXPRESSION_PROPERTY),
        select_property=parameter.get_property(SELECT_PROPERTY_PROPERTY),
        display_property=parameter.get_property(DISPLAY_PROPERTY_PROPERTY),
    )

    required = parameter.get_property(REQUIRED_PROPERTY)
    if required is not None:
        template_parameter.required = required.lower() == "true"

    if parameter.default_value_expression is not None:
        # Literal text only, the expression is never evaluated.
        template_parameter.default_value = (
            parameter.default_value_expression.replace('"', "").replace("'", "")
        )

    template_parameter.options = split_list_property(parameter.get_property(OPTIONS_PROPERTY))
    try:
        template_parameter.dependencies = parse_dependencies(
            parameter.get_property(DEPENDENCIES_PROPERTY)
        )
    except MalformedDependencyError as exc:
        raise ReportingError(
            ERROR_REPORTING_PARAMETER_MALFORMED_DEPENDENCY, parameter.name, exc.entry
        ) from exc

    return template_parameter


def extract_template_parameters(report: CompiledReport) -> list[TemplateParameter]:
    """Return the user-facing parameters of ``report`` in declaration order."""

    parameters = [
        create_parameter(parameter)
        for parameter in report.parameters
        if is_user_parameter(parameter)
    ]
    logger.debug("Extracted %d parameters from report %s", len(parameters), report.name)
    return parameters


__all__ = ["create_parameter", "extract_template_parameters", "is_user_parameter"]
