"""Use case for listing templates."""

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from reporting.domain.entities import ReportTemplate
from reporting.infrastructure.repositories import TemplateRepository

from .rights import has_template_access


def list_templates(
    session: Session,
    *,
    rights: Iterable[str] | None = None,
    skip: int = 0,
    limit: int | None = 100,
) -> Sequence[ReportTemplate]:
    """Return templates ordered by name.

    When ``rights`` is given only the templates whose required rights are all
    held are returned.
    """

    templates = TemplateRepository(session).list(skip=skip, limit=limit)
    if rights is None:
        return templates
    held = set(rights)
    return [template for template in templates if has_template_access(template, held)]
