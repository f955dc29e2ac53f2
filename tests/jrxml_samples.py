"""Builders for the ``.jrxml`` documents used by the tests."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

JASPER_NAMESPACE = "http://jasperreports.sourceforge.net/jasperreports"


def _properties(properties: dict[str, str] | None) -> str:
    return "".join(
        f"<property name={quoteattr(key)} value={quoteattr(value)}/>"
        for key, value in (properties or {}).items()
    )


def parameter_xml(
    name: str,
    *,
    class_name: str | None = "java.lang.String",
    display_name: str | None = None,
    properties: dict[str, str] | None = None,
    for_prompting: bool | None = None,
    description: str | None = None,
    default_expression: str | None = None,
) -> str:
    attributes = f"name={quoteattr(name)}"
    if class_name is not None:
        attributes += f" class={quoteattr(class_name)}"
    if for_prompting is not None:
        attributes += f' isForPrompting="{str(for_prompting).lower()}"'

    all_properties: dict[str, str] = {}
    if display_name is not None:
        all_properties["displayName"] = display_name
    all_properties.update(properties or {})

    body = _properties(all_properties)
    if description is not None:
        body += f"<parameterDescription>{escape(description)}</parameterDescription>"
    if default_expression is not None:
        body += f"<defaultValueExpression><![CDATA[{default_expression}]]></defaultValueExpression>"
    return f"<parameter {attributes}>{body}</parameter>"


def jrxml(
    *parameters: str,
    name: str = "stock_summary",
    properties: dict[str, str] | None = None,
    query: str | None = "select * from stock_cards",
) -> bytes:
    """Return a report definition declaring ``parameters``."""

    query_xml = (
        f"<queryString language=\"SQL\"><![CDATA[{query}]]></queryString>" if query else ""
    )
    document = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<jasperReport xmlns="{JASPER_NAMESPACE}" name={quoteattr(name)} language="java">'
        f"{_properties(properties)}"
        f"{''.join(parameters)}"
        f"{query_xml}"
        '<field name="product" class="java.lang.String"/>'
        '<field name="quantity" class="java.lang.Integer"/>'
        "</jasperReport>"
    )
    return document.encode("utf-8")


def stock_report(**kwargs) -> bytes:
    """Report with a region select and a facility select depending on it."""

    return jrxml(
        parameter_xml(
            "Region",
            display_name="Region",
            description="Geographic zone",
            properties={"required": "true", "options": r"North,South\,East"},
            default_expression='"North"',
        ),
        parameter_xml(
            "Facility",
            class_name="java.util.UUID",
            display_name="Facility",
            properties={
                "selectExpression": "/api/facilities?zoneId={zone}",
                "selectProperty": "id",
                "displayProperty": "name",
                "dependencies": "Region:id:zone",
            },
        ),
        parameter_xml("internalFlag", class_name="java.lang.Boolean", for_prompting=False),
        **kwargs,
    )
