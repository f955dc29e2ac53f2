"""Persistence layer for report templates."""

from collections.abc import Sequence

from sqlalchemy.orm import Session, selectinload

from reporting.domain.entities import ParameterDependency, ReportTemplate, TemplateParameter
from reporting.infrastructure.models import (
    ParameterDependencyModel,
    ReportTemplateModel,
    TemplateParameterModel,
)
from reporting.utils import ensure_utc, now_utc


class TemplateRepository:
    """Provide CRUD operations for report templates and their parameters."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, skip: int = 0, limit: int | None = 100) -> Sequence[ReportTemplate]:
        query = self._query().order_by(ReportTemplateModel.name)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, template_id: str) -> ReportTemplate | None:
        model = self._get_model(id=template_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> ReportTemplate | None:
        model = self._get_model(name=name)
        return self._to_entity(model) if model else None

    def save(self, template: ReportTemplate) -> ReportTemplate:
        """Insert ``template`` or update the stored record sharing its id."""

        model = self._get_model(id=template.id) if template.id is not None else None
        if model is None:
            model = ReportTemplateModel(created_at=now_utc())
            if template.id is not None:
                model.id = template.id
            self.session.add(model)
        else:
            model.updated_at = now_utc()
        self._apply_entity_to_model(model, template)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, template_id: str, *, commit: bool = True) -> None:
        """Delete the template and its parameters.

        With ``commit=False`` the deletion is only flushed so the caller can
        finish the unit of work.
        """

        model = self._get_model(id=template_id)
        if not model:
            msg = f"Template with id {template_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()

    def _query(self):
        return self.session.query(ReportTemplateModel).options(
            selectinload(ReportTemplateModel.parameters).selectinload(
                TemplateParameterModel.dependencies
            )
        )

    def _get_model(self, **filters) -> ReportTemplateModel | None:
        return self._query().filter_by(**filters).first()

    @staticmethod
    def _to_entity(model: ReportTemplateModel) -> ReportTemplate:
        return ReportTemplate(
            id=model.id,
            name=model.name,
            type=model.type,
            description=model.description,
            required_rights=list(model.required_rights or []),
            data=model.data,
            parameters=[
                TemplateRepository._parameter_to_entity(parameter)
                for parameter in model.parameters
            ],
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    @staticmethod
    def _parameter_to_entity(model: TemplateParameterModel) -> TemplateParameter:
        return TemplateParameter(
            id=model.id,
            name=model.name,
            display_name=model.display_name,
            description=model.description,
            data_type=model.data_type,
            select_expression=model.select_expression,
            select_property=model.select_property,
            display_property=model.display_property,
            required=model.required,
            default_value=model.default_value,
            options=list(model.options or []),
            dependencies=[
                ParameterDependency(
                    dependency=dependency.dependency,
                    property=dependency.property,
                    placeholder=dependency.placeholder,
                )
                for dependency in model.dependencies
            ],
        )

    @staticmethod
    def _apply_entity_to_model(model: ReportTemplateModel, template: ReportTemplate) -> None:
        model.name = template.name
        model.type = template.type
        model.description = template.description
        model.required_rights = list(template.required_rights)
        model.data = template.data
        # Parameters are owned by the template and always replaced as a whole.
        model.parameters.clear()
        for position, parameter in enumerate(template.parameters):
            model.parameters.append(
                TemplateParameterModel(
                    position=position,
                    name=parameter.name,
                    display_name=parameter.display_name,
                    description=parameter.description,
                    data_type=parameter.data_type,
                    select_expression=parameter.select_expression,
                    select_property=parameter.select_property,
                    display_property=parameter.display_property,
                    required=parameter.required,
                    default_value=parameter.default_value,
                    options=list(parameter.options),
                    dependencies=[
                        ParameterDependencyModel(
                            position=index,
                            dependency=dependency.dependency,
                            property=dependency.property,
                            placeholder=dependency.placeholder,
                        )
                        for index, dependency in enumerate(parameter.dependencies)
                    ],
                )
            )


__all__ = ["TemplateRepository"]
