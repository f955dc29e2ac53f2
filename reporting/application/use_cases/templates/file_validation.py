"""Validate uploaded report files and copy their content into a template."""

from __future__ import annotations

from reporting.config import get_settings
from reporting.domain.entities import ReportTemplate
from reporting.domain.exceptions import ReportingError
from reporting.domain.messages import (
    ERROR_REPORTING_FILE_EMPTY,
    ERROR_REPORTING_FILE_INCORRECT_TYPE,
    ERROR_REPORTING_FILE_INVALID,
    ERROR_REPORTING_FILE_MISSING,
    ERROR_REPORTING_IO,
)
from reporting.infrastructure.report_compiler import ReportCompilationError, compile_report
from reporting.infrastructure.report_serializer import serialize_report

from .parameters import extract_template_parameters
from .report_file import ReportFile

REPORT_TYPE_PROPERTY = "reportType"


def _throw_if_file_is_missing(file: ReportFile | None) -> None:
    if file is None:
        raise ReportingError(ERROR_REPORTING_FILE_MISSING)


def _throw_if_incorrect_file_type(file: ReportFile) -> None:
    extension = get_settings().template_file_extension
    if not file.filename or not file.filename.endswith(extension):
        raise ReportingError(ERROR_REPORTING_FILE_INCORRECT_TYPE, file.filename)


def _read_content(file: ReportFile) -> bytes:
    try:
        content = file.read()
    except OSError as exc:
        raise ReportingError(ERROR_REPORTING_IO, str(exc)) from exc
    if not content:
        raise ReportingError(ERROR_REPORTING_FILE_EMPTY, file.filename)
    return content


def validate_file_and_set_data(template: ReportTemplate, file: ReportFile | None) -> None:
    """Compile ``file`` and copy its type, parameters and data into ``template``.

    The template's previous parameters are discarded. Nothing is persisted.

    Raises:
        ReportingError: If the file is missing, has the wrong extension, is
            empty, cannot be read, does not compile or declares invalid
            parameters.
    """

    _throw_if_file_is_missing(file)
    _throw_if_incorrect_file_type(file)
    content = _read_content(file)

    try:
        report = compile_report(content)
    except ReportCompilationError as exc:
        raise ReportingError(ERROR_REPORTING_FILE_INVALID, file.filename) from exc

    parameters = extract_template_parameters(report)

    report_type = report.get_property(REPORT_TYPE_PROPERTY)
    if report_type is not None:
        template.type = report_type
    template.parameters = parameters
    template.data = serialize_report(report)


__all__ = ["REPORT_TYPE_PROPERTY", "validate_file_and_set_data"]
