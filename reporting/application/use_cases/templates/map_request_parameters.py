"""Map incoming request parameters onto a template's declared parameters."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from reporting.domain.entities import ReportTemplate

_MISSING_VALUE_SENTINELS = frozenset({"null", "undefined"})


def _first_value(values: Sequence[str | None] | str | None) -> str | None:
    if values is None:
        return None
    if isinstance(values, str):
        return values
    return values[0] if len(values) > 0 else None


def _has_value(value: str | None) -> bool:
    return value is not None and bool(value.strip()) and value not in _MISSING_VALUE_SENTINELS


def map_request_parameters_to_template(
    request_parameters: Mapping[str, Sequence[str | None] | str | None],
    template: ReportTemplate,
) -> dict[str, str]:
    """Return the request values matching the template's parameters.

    Request names are matched case-insensitively and the first value of each
    match is stored under the declared parameter name. Blank values and the
    ``"null"``/``"undefined"`` sentinels are left out, as are parameters the
    request does not mention.
    """

    if not template.parameters:
        return {}

    mapped: dict[str, str] = {}
    for parameter in template.parameters:
        declared = parameter.name.lower()
        for request_name, values in request_parameters.items():
            if request_name.lower() != declared:
                continue
            value = _first_value(values)
            if _has_value(value):
                mapped[parameter.name] = value
    return mapped


__all__ = ["map_request_parameters_to_template"]
