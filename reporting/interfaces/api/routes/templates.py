"""Rutas para administrar plantillas de reportes y sus parámetros."""

import logging

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    Request,
    Response,
    UploadFile,
    status,
)
from sqlalchemy.orm import Session

from reporting.application.use_cases.templates import (
    ReportFile,
    delete_template as delete_template_uc,
    ensure_template_access,
    get_template as get_template_uc,
    list_templates as list_templates_uc,
    map_request_parameters_to_template,
    save_template as save_template_uc,
)
from reporting.domain.entities import Principal, ReportTemplate
from reporting.domain.exceptions import (
    MessageKeyedError,
    PermissionMessageError,
)
from reporting.domain.messages import ERROR_REPORTING_TEMPLATE_NOT_FOUND
from reporting.infrastructure.database import get_db
from reporting.interfaces.api.dependencies import (
    TEMPLATES_EDIT_RIGHT,
    get_current_principal,
    require_right,
)
from reporting.interfaces.api.schemas import TemplateParameterValues, TemplateRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


def _template_to_read_model(template: ReportTemplate) -> TemplateRead:
    return TemplateRead.model_validate(template)


def _to_http_exception(exc: MessageKeyedError) -> HTTPException:
    if isinstance(exc, PermissionMessageError):
        status_code = status.HTTP_403_FORBIDDEN
    elif exc.message_key == ERROR_REPORTING_TEMPLATE_NOT_FOUND:
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=status_code, detail=exc.message)


def _get_accessible_template(
    db: Session, template_id: str, principal: Principal
) -> ReportTemplate:
    try:
        template = get_template_uc(db, template_id)
        ensure_template_access(template, principal.rights)
    except MessageKeyedError as exc:
        raise _to_http_exception(exc) from exc
    return template


@router.post("/", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def upload_template(
    file: UploadFile | None = File(default=None),
    name: str = Form(..., min_length=1, max_length=255),
    description: str | None = Form(default=None),
    required_rights: list[str] = Form(default=[], alias="requiredRights"),
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_right(TEMPLATES_EDIT_RIGHT)),
) -> TemplateRead:
    """Carga un archivo .jrxml y crea o actualiza la plantilla con ese nombre."""

    report_file = ReportFile(filename=file.filename, stream=file.file) if file else None
    try:
        template = save_template_uc(
            db,
            file=report_file,
            name=name,
            description=description,
            required_rights=required_rights,
        )
    except MessageKeyedError as exc:
        logger.warning(
            "No se pudo guardar la plantilla %s de %s: %s",
            name,
            principal.subject,
            exc.message_key,
        )
        raise _to_http_exception(exc) from exc

    return _template_to_read_model(template)


@router.get("/", response_model=list[TemplateRead])
def list_templates(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> list[TemplateRead]:
    """Lista las plantillas a las que el usuario tiene acceso."""

    templates = list_templates_uc(db, rights=principal.rights, skip=skip, limit=limit)
    return [_template_to_read_model(template) for template in templates]


@router.get("/{template_id}", response_model=TemplateRead)
def get_template(
    template_id: str,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> TemplateRead:
    """Obtiene una plantilla con sus parámetros."""

    template = _get_accessible_template(db, template_id, principal)
    return _template_to_read_model(template)


@router.get("/{template_id}/parameters", response_model=TemplateParameterValues)
def resolve_template_parameters(
    template_id: str,
    request: Request,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> TemplateParameterValues:
    """Asocia los parámetros de la consulta con los declarados por la plantilla."""

    template = _get_accessible_template(db, template_id, principal)

    request_parameters: dict[str, list[str]] = {}
    for key, value in request.query_params.multi_items():
        request_parameters.setdefault(key, []).append(value)

    return TemplateParameterValues(
        template_id=template.id,
        parameters=map_request_parameters_to_template(request_parameters, template),
    )


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(
    template_id: str,
    db: Session = Depends(get_db),
    principal: Principal = Depends(require_right(TEMPLATES_EDIT_RIGHT)),
) -> Response:
    """Elimina una plantilla y sus parámetros."""

    _get_accessible_template(db, template_id, principal)
    try:
        delete_template_uc(db, template_id)
    except MessageKeyedError as exc:
        raise _to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
