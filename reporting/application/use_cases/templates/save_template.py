"""Use case for uploading a template, updating it in place when the name exists."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from reporting.config import get_settings
from reporting.domain.entities import ReportTemplate
from reporting.infrastructure.repositories import TemplateRepository

from .file_validation import validate_file_and_set_data
from .report_file import ReportFile
from .rights import validate_required_rights

logger = logging.getLogger(__name__)


def save_template(
    session: Session,
    *,
    file: ReportFile | None,
    name: str,
    description: str | None,
    required_rights: Sequence[str] = (),
) -> ReportTemplate:
    """Save the template called ``name`` from ``file``.

    An existing template keeps its identity: only its description, required
    rights and the file-derived fields (type, parameters, data) change, so
    records pointing at the template stay valid.

    Raises:
        ValidationMessageError: If a required right does not exist.
        ReportingError: If the file fails validation.
    """

    validate_required_rights(session, required_rights)

    repository = TemplateRepository(session)
    template = repository.get_by_name(name)
    if template is None:
        template = ReportTemplate(
            id=None,
            name=name,
            type=get_settings().default_report_type,
            description=description,
        )
    else:
        template.description = description
    template.replace_required_rights(list(required_rights))

    validate_file_and_set_data(template, file)

    saved = repository.save(template)
    logger.info(
        "Saved template %s (%s) with %d parameters",
        saved.name,
        saved.id,
        len(saved.parameters),
    )
    return saved


__all__ = ["save_template"]
