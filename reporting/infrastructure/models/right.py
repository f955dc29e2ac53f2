"""SQLAlchemy model for authorization rights."""

from sqlalchemy import Column, Integer, String

from reporting.infrastructure.database import Base


class RightModel(Base):
    """Database representation of the rights known to the system."""

    __tablename__ = "right"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    type = Column(String(50), nullable=True)
    description = Column(String(255), nullable=True)


__all__ = ["RightModel"]
