"""Schemas for report template endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ParameterDependencyRead(BaseModel):
    dependency: str
    property: str
    placeholder: str

    model_config = ConfigDict(from_attributes=True)


class TemplateParameterRead(BaseModel):
    name: str
    display_name: str
    description: str | None = None
    data_type: str | None = None
    select_expression: str | None = None
    select_property: str | None = None
    display_property: str | None = None
    required: bool = False
    default_value: str | None = None
    options: list[str] = Field(default_factory=list)
    dependencies: list[ParameterDependencyRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class TemplateRead(BaseModel):
    """Template as returned by the API; the compiled data is never exposed."""

    id: str
    name: str
    type: str
    description: str | None = None
    required_rights: list[str] = Field(default_factory=list)
    parameters: list[TemplateParameterRead] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class TemplateParameterValues(BaseModel):
    """Request values resolved against a template's parameters."""

    template_id: str
    parameters: dict[str, str]
