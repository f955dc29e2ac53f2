"""Checks between templates, callers and the rights reference data."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from reporting.domain.entities import ReportTemplate
from reporting.domain.exceptions import PermissionMessageError, ValidationMessageError
from reporting.domain.messages import ERROR_PERMISSION_MISSING, ERROR_RIGHT_NOT_FOUND
from reporting.infrastructure.repositories import RightRepository

logger = logging.getLogger(__name__)


def validate_required_rights(session: Session, rights: Iterable[str]) -> None:
    """Ensure every name in ``rights`` is a known right.

    Raises:
        ValidationMessageError: Naming the first unknown right.
    """

    repository = RightRepository(session)
    for right in rights:
        if repository.find_right(right) is None:
            logger.warning("Rejected unknown right %s", right)
            raise ValidationMessageError(ERROR_RIGHT_NOT_FOUND, right)


def missing_rights(template: ReportTemplate, rights: Iterable[str]) -> list[str]:
    held = set(rights)
    return [right for right in template.required_rights if right not in held]


def has_template_access(template: ReportTemplate, rights: Iterable[str]) -> bool:
    return not missing_rights(template, rights)


def ensure_template_access(template: ReportTemplate, rights: Iterable[str]) -> None:
    """Raise :class:`PermissionMessageError` unless ``rights`` cover the template."""

    missing = missing_rights(template, rights)
    if missing:
        raise PermissionMessageError(ERROR_PERMISSION_MISSING, missing[0])


__all__ = [
    "ensure_template_access",
    "has_template_access",
    "missing_rights",
    "validate_required_rights",
]
