"""SQLAlchemy model for report templates."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, LargeBinary, String, Text
from sqlalchemy.dialects.mssql import JSON as MSSQLJSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.types import JSON

from reporting.infrastructure.database import Base
from reporting.utils import now_utc

_rights_json_type = (
    JSONB()
    .with_variant(JSON(), "sqlite")
    .with_variant(JSON(), "mysql")
    .with_variant(MSSQLJSON(), "mssql")
)


def _new_identifier() -> str:
    return str(uuid4())


class ReportTemplateModel(Base):
    """Database representation of an uploaded report template."""

    __tablename__ = "report_template"

    id = Column(String(36), primary_key=True, default=_new_identifier)
    name = Column(String(255), nullable=False, unique=True, index=True)
    type = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    required_rights = Column(_rights_json_type, nullable=False, default=list)
    data = Column(LargeBinary, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=now_utc)

    parameters = relationship(
        "TemplateParameterModel",
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="TemplateParameterModel.position",
    )


__all__ = ["ReportTemplateModel"]
