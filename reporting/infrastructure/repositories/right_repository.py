"""Persistence layer for authorization rights."""

from sqlalchemy.orm import Session

from reporting.domain.entities import Right
from reporting.infrastructure.models import RightModel


class RightRepository:
    """Provide access to the rights reference data."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_right(self, name: str) -> Right | None:
        """Return the right called exactly ``name`` or ``None``."""

        model = self.session.query(RightModel).filter_by(name=name).first()
        return self._to_entity(model) if model else None

    def create(self, right: Right) -> Right:
        model = RightModel(name=right.name, type=right.type, description=right.description)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: RightModel) -> Right:
        return Right(
            id=model.id, name=model.name, type=model.type, description=model.description
        )


__all__ = ["RightRepository"]
