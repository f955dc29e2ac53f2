"""Use case for deleting templates."""

import logging

from sqlalchemy.orm import Session

from reporting.infrastructure.repositories import TemplateRepository

from .get_template import get_template

logger = logging.getLogger(__name__)


def delete_template(session: Session, template_id: str) -> None:
    """Delete the template and its parameters."""

    template = get_template(session, template_id)
    TemplateRepository(session).delete(template.id)
    logger.info("Deleted template %s (%s)", template.name, template.id)
