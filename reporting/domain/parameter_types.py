"""Closed registry of value types a report parameter may declare."""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from uuid import UUID

DEFAULT_PARAMETER_TYPE = "java.lang.String"

_PARAMETER_VALUE_TYPES: dict[str, type] = {
    "java.lang.String": str,
    "java.lang.Boolean": bool,
    "java.lang.Byte": int,
    "java.lang.Short": int,
    "java.lang.Integer": int,
    "java.lang.Long": int,
    "java.math.BigInteger": int,
    "java.lang.Float": float,
    "java.lang.Double": float,
    "java.lang.Number": float,
    "java.math.BigDecimal": Decimal,
    "java.util.Date": datetime,
    "java.sql.Date": date,
    "java.sql.Time": time,
    "java.sql.Timestamp": datetime,
    "java.time.LocalDate": date,
    "java.time.LocalDateTime": datetime,
    "java.time.ZonedDateTime": datetime,
    "java.util.UUID": UUID,
    "java.util.Collection": list,
    "java.util.List": list,
    "java.util.Set": set,
    "java.util.Map": dict,
    "java.lang.Object": object,
}


def resolve_parameter_type(type_name: str) -> type | None:
    """Return the Python type registered for ``type_name`` or ``None``."""

    return _PARAMETER_VALUE_TYPES.get(type_name.strip())


def is_supported_parameter_type(type_name: str) -> bool:
    return resolve_parameter_type(type_name) is not None


__all__ = [
    "DEFAULT_PARAMETER_TYPE",
    "is_supported_parameter_type",
    "resolve_parameter_type",
]
