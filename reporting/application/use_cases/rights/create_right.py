"""Use case for registering a right."""

from sqlalchemy.orm import Session

from reporting.domain.entities import Right
from reporting.infrastructure.repositories import RightRepository


def create_right(
    session: Session,
    *,
    name: str,
    type: str | None = None,
    description: str | None = None,
) -> Right:
    """Create the right called ``name``."""

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("El nombre del permiso no puede estar vacío")

    repository = RightRepository(session)
    if repository.find_right(normalized_name) is not None:
        raise ValueError("El permiso ya existe")

    return repository.create(
        Right(id=None, name=normalized_name, type=type, description=description)
    )
