import pytest

from jrxml_samples import jrxml, parameter_xml, stock_report
from reporting.domain.entities import CompiledReport
from reporting.infrastructure.report_compiler import (
    BUILT_IN_PARAMETERS,
    ReportCompilationError,
    compile_report,
)
from reporting.infrastructure.report_serializer import (
    ReportSerializationError,
    deserialize_report,
    serialize_report,
)


def _parameter(report: CompiledReport, name: str):
    return next(parameter for parameter in report.parameters if parameter.name == name)


def test_compile_report_reads_name_properties_and_query():
    report = compile_report(stock_report(properties={"reportType": "Stock"}))

    assert report.name == "stock_summary"
    assert report.language == "java"
    assert report.get_property("reportType") == "Stock"
    assert report.query_text == "select * from stock_cards"
    assert report.query_language == "SQL"
    assert [field.name for field in report.fields] == ["product", "quantity"]


def test_compile_report_adds_built_in_parameters_as_system_defined():
    report = compile_report(jrxml())

    built_in = [parameter for parameter in report.parameters if parameter.system_defined]
    assert {parameter.name for parameter in built_in} == set(BUILT_IN_PARAMETERS)
    assert not any(parameter.for_prompting for parameter in built_in)


def test_compile_report_reads_declared_parameters():
    report = compile_report(stock_report())

    region = _parameter(report, "Region")
    assert region.system_defined is False
    assert region.for_prompting is True
    assert region.value_class_name == "java.lang.String"
    assert region.description == "Geographic zone"
    assert region.default_value_expression == '"North"'
    assert region.get_property("options") == r"North,South\,East"

    assert _parameter(report, "internalFlag").for_prompting is False


def test_compile_report_defaults_parameter_class_to_string():
    report = compile_report(jrxml(parameter_xml("period", class_name=None, display_name="Period")))

    assert _parameter(report, "period").value_class_name == "java.lang.String"


@pytest.mark.parametrize(
    "source",
    [
        b"<jasperReport name='broken'>",
        b"not xml at all",
        b"<report name='other'/>",
        b"<jasperReport/>",
        b'<?xml version="1.0" encoding="x-unknown"?><jasperReport name="r"/>',
        b'<?xml version="1.0" encoding="utf-16"?><jasperReport name="r"/>',
    ],
)
def test_compile_report_rejects_invalid_documents(source):
    with pytest.raises(ReportCompilationError):
        compile_report(source)


def test_compile_report_rejects_duplicate_parameters():
    source = jrxml(
        parameter_xml("period", display_name="Period"),
        parameter_xml("period", display_name="Period again"),
    )

    with pytest.raises(ReportCompilationError, match="period"):
        compile_report(source)


def test_compile_report_rejects_parameters_shadowing_built_ins():
    with pytest.raises(ReportCompilationError, match="REPORT_CONNECTION"):
        compile_report(jrxml(parameter_xml("REPORT_CONNECTION", display_name="Connection")))


def test_serialized_report_reads_back_unchanged():
    report = compile_report(stock_report(properties={"reportType": "Stock"}))

    data = serialize_report(report)

    assert isinstance(data, bytes)
    assert deserialize_report(data) == report


@pytest.mark.parametrize(
    "data",
    [b"\xff\xfe", b"[]", b'{"version": 99, "report": {}}', b'{"version": 1, "report": {}}'],
)
def test_deserialize_report_rejects_unknown_payloads(data):
    with pytest.raises(ReportSerializationError):
        deserialize_report(data)
