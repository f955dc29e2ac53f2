"""Use case for retrieving a template."""

from sqlalchemy.orm import Session

from reporting.domain.entities import ReportTemplate
from reporting.domain.exceptions import ReportingError
from reporting.domain.messages import ERROR_REPORTING_TEMPLATE_NOT_FOUND
from reporting.infrastructure.repositories import TemplateRepository


def get_template(session: Session, template_id: str) -> ReportTemplate:
    """Return the template identified by ``template_id`` or raise an error."""

    template = TemplateRepository(session).get(template_id)
    if template is None:
        raise ReportingError(ERROR_REPORTING_TEMPLATE_NOT_FOUND, template_id)
    return template
