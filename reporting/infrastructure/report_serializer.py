"""Serialization boundary between compiled reports and stored template data."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from reporting.domain.entities import CompiledReport, ReportField, ReportParameter

FORMAT_VERSION = 1


class ReportSerializationError(ValueError):
    """Raised when stored template data cannot be turned back into a report."""


def serialize_report(report: CompiledReport) -> bytes:
    """Return the opaque byte payload stored as template ``data``."""

    payload = {"version": FORMAT_VERSION, "report": asdict(report)}
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


def deserialize_report(data: bytes) -> CompiledReport:
    """Rebuild the :class:`CompiledReport` stored by :func:`serialize_report`."""

    try:
        payload: dict[str, Any] = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ReportSerializationError("Stored report data is not readable") from exc

    if not isinstance(payload, dict) or payload.get("version") != FORMAT_VERSION:
        raise ReportSerializationError("Unsupported stored report format")

    report = payload.get("report")
    if not isinstance(report, dict):
        raise ReportSerializationError("Stored report data has no report section")

    try:
        return CompiledReport(
            name=report["name"],
            language=report.get("language"),
            properties=dict(report.get("properties") or {}),
            parameters=tuple(
                ReportParameter(**{**parameter, "properties": dict(parameter["properties"])})
                for parameter in report.get("parameters") or ()
            ),
            fields=tuple(ReportField(**field) for field in report.get("fields") or ()),
            query_text=report.get("query_text"),
            query_language=report.get("query_language"),
        )
    except (KeyError, TypeError) as exc:
        raise ReportSerializationError("Stored report data is incomplete") from exc


__all__ = [
    "FORMAT_VERSION",
    "ReportSerializationError",
    "deserialize_report",
    "serialize_report",
]
