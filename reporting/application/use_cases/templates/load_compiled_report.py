"""Use case for reading back the compiled report stored with a template."""

from reporting.domain.entities import CompiledReport, ReportTemplate
from reporting.infrastructure.report_serializer import (
    ReportSerializationError,
    deserialize_report,
)


def load_compiled_report(template: ReportTemplate) -> CompiledReport:
    """Return the compiled report kept in ``template.data``.

    Raises:
        ReportSerializationError: If the template carries no readable data.
    """

    if not template.data:
        raise ReportSerializationError(f"Template {template.name} has no compiled report")
    return deserialize_report(template.data)
