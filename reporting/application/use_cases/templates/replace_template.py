"""Use case for replacing any same-named template with a new record."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from reporting.domain.entities import ReportTemplate
from reporting.infrastructure.repositories import TemplateRepository

from .file_validation import validate_file_and_set_data
from .report_file import ReportFile

logger = logging.getLogger(__name__)


def replace_template(
    session: Session, template: ReportTemplate, file: ReportFile | None
) -> ReportTemplate:
    """Validate ``file`` into ``template`` and store it as a brand new record.

    A template with the same name is deleted in the same commit. The saved
    template always gets a new identity, so references to the old record are
    left dangling.

    Raises:
        ReportingError: If the file fails validation. Nothing is deleted then.
    """

    validate_file_and_set_data(template, file)

    repository = TemplateRepository(session)
    existing = repository.get_by_name(template.name)
    if existing is not None:
        repository.delete(existing.id, commit=False)
        logger.info("Replacing template %s (%s)", existing.name, existing.id)

    template.id = None
    saved = repository.save(template)
    logger.info("Stored template %s (%s)", saved.name, saved.id)
    return saved


__all__ = ["replace_template"]
