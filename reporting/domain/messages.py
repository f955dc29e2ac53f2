"""Message keys raised by the domain and their default user-facing texts."""

from __future__ import annotations

ERROR_REPORTING_FILE_MISSING = "report.error.reporting.file.missing"
ERROR_REPORTING_FILE_INCORRECT_TYPE = "report.error.reporting.file.incorrectType"
ERROR_REPORTING_FILE_EMPTY = "report.error.reporting.file.empty"
ERROR_REPORTING_FILE_INVALID = "report.error.reporting.file.invalid"
ERROR_REPORTING_IO = "report.error.reporting.io"
ERROR_REPORTING_TEMPLATE_EXIST = "report.error.reporting.template.exist"
ERROR_REPORTING_TEMPLATE_NOT_FOUND = "report.error.reporting.template.notFound"
ERROR_REPORTING_PARAMETER_MISSING = "report.error.reporting.parameter.missing"
ERROR_REPORTING_PARAMETER_INCORRECT_TYPE = "report.error.reporting.parameter.incorrectType"
ERROR_REPORTING_PARAMETER_MALFORMED_DEPENDENCY = (
    "report.error.reporting.parameter.malformedDependency"
)
ERROR_RIGHT_NOT_FOUND = "report.error.authorization.right.notFound"
ERROR_PERMISSION_MISSING = "report.error.authorization.permission.missing"

_DEFAULT_MESSAGES: dict[str, str] = {
    ERROR_REPORTING_FILE_MISSING: "Debe adjuntar el archivo del reporte",
    ERROR_REPORTING_FILE_INCORRECT_TYPE: "El archivo del reporte debe tener extensión .jrxml",
    ERROR_REPORTING_FILE_EMPTY: "El archivo del reporte está vacío",
    ERROR_REPORTING_FILE_INVALID: "El archivo del reporte no es válido",
    ERROR_REPORTING_IO: "Error al leer el archivo del reporte: {0}",
    ERROR_REPORTING_TEMPLATE_EXIST: "Ya existe una plantilla con el nombre {0}",
    ERROR_REPORTING_TEMPLATE_NOT_FOUND: "Plantilla no encontrada",
    ERROR_REPORTING_PARAMETER_MISSING: "Falta la propiedad {0} en un parámetro del reporte",
    ERROR_REPORTING_PARAMETER_INCORRECT_TYPE: (
        "El parámetro {0} declara un tipo no soportado: {1}"
    ),
    ERROR_REPORTING_PARAMETER_MALFORMED_DEPENDENCY: (
        "El parámetro {0} declara una dependencia mal formada: {1}"
    ),
    ERROR_RIGHT_NOT_FOUND: "No existe el permiso {0}",
    ERROR_PERMISSION_MISSING: "No autorizado, se requiere el permiso {0}",
}


def render_message(message_key: str, *params: object) -> str:
    """Return the default text for ``message_key`` filled with ``params``.

    Unknown keys are returned unchanged so callers always get something to show.
    """

    template = _DEFAULT_MESSAGES.get(message_key)
    if template is None:
        return message_key
    return template.format(*params)


__all__ = [
    "ERROR_PERMISSION_MISSING",
    "ERROR_REPORTING_FILE_EMPTY",
    "ERROR_REPORTING_FILE_INCORRECT_TYPE",
    "ERROR_REPORTING_FILE_INVALID",
    "ERROR_REPORTING_FILE_MISSING",
    "ERROR_REPORTING_IO",
    "ERROR_REPORTING_PARAMETER_INCORRECT_TYPE",
    "ERROR_REPORTING_PARAMETER_MALFORMED_DEPENDENCY",
    "ERROR_REPORTING_PARAMETER_MISSING",
    "ERROR_REPORTING_TEMPLATE_EXIST",
    "ERROR_REPORTING_TEMPLATE_NOT_FOUND",
    "ERROR_RIGHT_NOT_FOUND",
    "render_message",
]
