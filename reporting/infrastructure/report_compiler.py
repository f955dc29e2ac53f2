"""Compile ``.jrxml`` report definitions into :class:`CompiledReport` objects."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from reporting.domain.entities import CompiledReport, ReportField, ReportParameter
from reporting.domain.parameter_types import DEFAULT_PARAMETER_TYPE

logger = logging.getLogger(__name__)

ROOT_ELEMENT = "jasperReport"

# Parameters every report receives from the engine; they are never prompted for.
BUILT_IN_PARAMETERS: dict[str, str] = {
    "REPORT_CONTEXT": "net.sf.jasperreports.engine.ReportContext",
    "REPORT_PARAMETERS_MAP": "java.util.Map",
    "JASPER_REPORTS_CONTEXT": "net.sf.jasperreports.engine.JasperReportsContext",
    "JASPER_REPORT": "net.sf.jasperreports.engine.JasperReport",
    "REPORT_CONNECTION": "java.sql.Connection",
    "REPORT_MAX_COUNT": "java.lang.Integer",
    "REPORT_DATA_SOURCE": "net.sf.jasperreports.engine.JRDataSource",
    "REPORT_SCRIPTLET": "net.sf.jasperreports.engine.JRAbstractScriptlet",
    "REPORT_LOCALE": "java.util.Locale",
    "REPORT_RESOURCE_BUNDLE": "java.util.ResourceBundle",
    "REPORT_TIME_ZONE": "java.util.TimeZone",
    "REPORT_FORMAT_FACTORY": "net.sf.jasperreports.engine.util.FormatFactory",
    "REPORT_CLASS_LOADER": "java.lang.ClassLoader",
    "REPORT_TEMPLATES": "java.util.Collection",
    "SORT_FIELDS": "java.util.List",
    "FILTER": "net.sf.jasperreports.engine.DatasetFilter",
    "REPORT_VIRTUALIZER": "net.sf.jasperreports.engine.JRVirtualizer",
    "IS_IGNORE_PAGINATION": "java.lang.Boolean",
}


class ReportCompilationError(ValueError):
    """Raised when a report definition cannot be compiled."""


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> Iterable[ET.Element]:
    return (child for child in element if _local_name(child.tag) == name)


def _first_child(element: ET.Element, name: str) -> ET.Element | None:
    return next(iter(_children(element, name)), None)


def _text_of(element: ET.Element | None) -> str | None:
    if element is None or element.text is None:
        return None
    text = element.text.strip()
    return text or None


def _parse_bool(value: str | None, *, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() == "true"


def _read_properties(element: ET.Element) -> dict[str, str]:
    properties: dict[str, str] = {}
    for prop in _children(element, "property"):
        name = prop.get("name")
        if not name:
            raise ReportCompilationError("Property without a name")
        value = prop.get("value")
        if value is None:
            value = prop.text or ""
        properties[name] = value
    return properties


def _read_parameter(element: ET.Element) -> ReportParameter:
    name = (element.get("name") or "").strip()
    if not name:
        raise ReportCompilationError("Parameter without a name")
    return ReportParameter(
        name=name,
        value_class_name=element.get("class") or DEFAULT_PARAMETER_TYPE,
        system_defined=False,
        for_prompting=_parse_bool(element.get("isForPrompting"), default=True),
        description=_text_of(_first_child(element, "parameterDescription")),
        default_value_expression=_text_of(_first_child(element, "defaultValueExpression")),
        properties=_read_properties(element),
    )


def _read_field(element: ET.Element) -> ReportField:
    name = (element.get("name") or "").strip()
    if not name:
        raise ReportCompilationError("Field without a name")
    return ReportField(
        name=name,
        value_class_name=element.get("class") or DEFAULT_PARAMETER_TYPE,
        description=_text_of(_first_child(element, "fieldDescription")),
    )


def _built_in_parameters() -> list[ReportParameter]:
    return [
        ReportParameter(
            name=name,
            value_class_name=value_class,
            system_defined=True,
            for_prompting=False,
        )
        for name, value_class in BUILT_IN_PARAMETERS.items()
    ]


def compile_report(source: bytes) -> CompiledReport:
    """Parse and validate ``source`` returning the compiled report.

    Raises:
        ReportCompilationError: If the document is not a well formed report
            definition.
    """

    try:
        root = ET.fromstring(source)
    except (ET.ParseError, LookupError, ValueError) as exc:
        # Unknown or multi-byte encodings in the XML declaration fail outside the parser.
        raise ReportCompilationError(f"Malformed report definition: {exc}") from exc

    if _local_name(root.tag) != ROOT_ELEMENT:
        raise ReportCompilationError(
            f"Unexpected root element '{_local_name(root.tag)}', expected '{ROOT_ELEMENT}'"
        )

    report_name = (root.get("name") or "").strip()
    if not report_name:
        raise ReportCompilationError("The report definition must declare a name")

    parameters = _built_in_parameters()
    seen = {parameter.name for parameter in parameters}
    for element in _children(root, "parameter"):
        parameter = _read_parameter(element)
        if parameter.name in seen:
            raise ReportCompilationError(
                f"Duplicate declaration of parameter: {parameter.name}"
            )
        seen.add(parameter.name)
        parameters.append(parameter)

    fields: list[ReportField] = []
    field_names: set[str] = set()
    for element in _children(root, "field"):
        report_field = _read_field(element)
        if report_field.name in field_names:
            raise ReportCompilationError(f"Duplicate declaration of field: {report_field.name}")
        field_names.add(report_field.name)
        fields.append(report_field)

    query = _first_child(root, "queryString")
    compiled = CompiledReport(
        name=report_name,
        language=root.get("language"),
        properties=_read_properties(root),
        parameters=tuple(parameters),
        fields=tuple(fields),
        query_text=_text_of(query),
        query_language=query.get("language") if query is not None else None,
    )
    logger.debug(
        "Compiled report %s with %d parameters", report_name, len(compiled.parameters)
    )
    return compiled


__all__ = ["BUILT_IN_PARAMETERS", "ReportCompilationError", "compile_report"]
