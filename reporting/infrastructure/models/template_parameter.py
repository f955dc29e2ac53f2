"""SQLAlchemy models for template parameters and their dependencies."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.mssql import JSON as MSSQLJSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression
from sqlalchemy.types import JSON

from reporting.infrastructure.database import Base

_options_json_type = (
    JSONB()
    .with_variant(JSON(), "sqlite")
    .with_variant(JSON(), "mysql")
    .with_variant(MSSQLJSON(), "mssql")
)


class TemplateParameterModel(Base):
    """Database representation of a parameter declared by a template."""

    __tablename__ = "template_parameter"

    id = Column(Integer, primary_key=True, index=True)
    template_id = Column(
        String(36),
        ForeignKey("report_template.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    data_type = Column(String(255), nullable=True)
    select_expression = Column(Text, nullable=True)
    select_property = Column(String(255), nullable=True)
    display_property = Column(String(255), nullable=True)
    required = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    default_value = Column(Text, nullable=True)
    options = Column(_options_json_type, nullable=False, default=list)

    template = relationship("ReportTemplateModel", back_populates="parameters")
    dependencies = relationship(
        "ParameterDependencyModel",
        back_populates="parameter",
        cascade="all, delete-orphan",
        order_by="ParameterDependencyModel.position",
    )


class ParameterDependencyModel(Base):
    """Database representation of a dependency between two parameters."""

    __tablename__ = "template_parameter_dependency"

    id = Column(Integer, primary_key=True, index=True)
    parameter_id = Column(
        Integer,
        ForeignKey("template_parameter.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(Integer, nullable=False, default=0)
    dependency = Column(String(255), nullable=False)
    property = Column(String(255), nullable=False)
    placeholder = Column(String(255), nullable=False)

    parameter = relationship("TemplateParameterModel", back_populates="dependencies")


__all__ = ["ParameterDependencyModel", "TemplateParameterModel"]
