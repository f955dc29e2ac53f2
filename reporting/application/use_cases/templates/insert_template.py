"""Use case for inserting a template whose name must not be taken."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from reporting.domain.entities import ReportTemplate
from reporting.domain.exceptions import ReportingError
from reporting.domain.messages import ERROR_REPORTING_TEMPLATE_EXIST
from reporting.infrastructure.repositories import TemplateRepository

from .file_validation import validate_file_and_set_data
from .report_file import ReportFile

logger = logging.getLogger(__name__)


def insert_template(
    session: Session, template: ReportTemplate, file: ReportFile | None
) -> ReportTemplate:
    """Validate ``file`` into ``template`` and insert it.

    Raises:
        ReportingError: If a template with the same name exists or the file
            fails validation.
    """

    repository = TemplateRepository(session)
    if repository.get_by_name(template.name) is not None:
        raise ReportingError(ERROR_REPORTING_TEMPLATE_EXIST, template.name)

    validate_file_and_set_data(template, file)

    saved = repository.save(template)
    logger.info("Inserted template %s (%s)", saved.name, saved.id)
    return saved


__all__ = ["insert_template"]
