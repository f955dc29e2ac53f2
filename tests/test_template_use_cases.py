from io import BytesIO

import pytest

from jrxml_samples import jrxml, parameter_xml, stock_report
from reporting.application.use_cases.templates import (
    ReportFile,
    delete_template,
    ensure_template_access,
    get_template,
    insert_template,
    list_templates,
    load_compiled_report,
    replace_template,
    save_template,
)
from reporting.domain.entities import ReportTemplate
from reporting.domain.exceptions import (
    PermissionMessageError,
    ReportingError,
    ValidationMessageError,
)
from reporting.domain.messages import (
    ERROR_PERMISSION_MISSING,
    ERROR_REPORTING_FILE_INCORRECT_TYPE,
    ERROR_REPORTING_TEMPLATE_EXIST,
    ERROR_REPORTING_TEMPLATE_NOT_FOUND,
    ERROR_RIGHT_NOT_FOUND,
)
from reporting.infrastructure.repositories import TemplateRepository


class _UntouchableStream(BytesIO):
    def read(self, *args, **kwargs):
        raise AssertionError("the file must not be read")


def _file(content: bytes | None = None, filename: str = "stock.jrxml") -> ReportFile:
    return ReportFile.from_bytes(filename, stock_report() if content is None else content)


def _period_report() -> bytes:
    return jrxml(
        parameter_xml("period", display_name="Period"),
        properties={"reportType": "Period Report"},
    )


def _new_template(name: str = "Stock summary", **overrides) -> ReportTemplate:
    values = {
        "id": None,
        "name": name,
        "type": "Stock",
        "description": "Loaded from disk",
        "required_rights": ["REPORTS_VIEW"],
    }
    values.update(overrides)
    return ReportTemplate(**values)


def test_save_template_creates_new_template_with_default_type(session, known_rights):
    template = save_template(
        session,
        file=_file(),
        name="Stock summary",
        description="Monthly stock",
        required_rights=["REPORTS_VIEW", "REPORTS_VIEW"],
    )

    assert template.id is not None
    assert template.type == "Consistency Report"
    assert template.description == "Monthly stock"
    assert template.required_rights == ["REPORTS_VIEW"]
    assert [parameter.name for parameter in template.parameters] == ["Region", "Facility"]
    assert template.parameters[1].dependencies[0].dependency == "Region"
    assert load_compiled_report(template).name == "stock_summary"


def test_save_template_rejects_unknown_rights_before_reading_the_file(session, known_rights):
    untouchable = ReportFile(filename="stock.jrxml", stream=_UntouchableStream())

    with pytest.raises(ValidationMessageError) as exc:
        save_template(
            session,
            file=untouchable,
            name="Stock summary",
            description=None,
            required_rights=["REPORTS_VIEW", "MISSING_RIGHT", "OTHER_MISSING"],
        )

    assert exc.value.message_key == ERROR_RIGHT_NOT_FOUND
    assert exc.value.params == ("MISSING_RIGHT",)
    assert TemplateRepository(session).list() == []


def test_save_template_updates_existing_template_in_place(session, known_rights):
    original = save_template(
        session,
        file=_file(),
        name="Stock summary",
        description="First",
        required_rights=["REPORTS_VIEW"],
    )

    updated = save_template(
        session,
        file=_file(_period_report()),
        name="Stock summary",
        description="Second",
        required_rights=["STOCK_CARDS_VIEW"],
    )

    assert updated.id == original.id
    assert updated.description == "Second"
    assert updated.required_rights == ["STOCK_CARDS_VIEW"]
    assert updated.type == "Period Report"
    assert [parameter.name for parameter in updated.parameters] == ["period"]
    assert len(TemplateRepository(session).list()) == 1


def test_save_template_keeps_type_when_file_declares_none(session, known_rights):
    save_template(
        session,
        file=_file(_period_report()),
        name="Stock summary",
        description=None,
        required_rights=[],
    )

    updated = save_template(
        session, file=_file(), name="Stock summary", description=None, required_rights=[]
    )

    assert updated.type == "Period Report"


def test_save_template_failure_keeps_stored_template(session, known_rights):
    original = save_template(
        session, file=_file(), name="Stock summary", description="First", required_rights=[]
    )

    with pytest.raises(ReportingError) as exc:
        save_template(
            session,
            file=_file(filename="stock.pdf"),
            name="Stock summary",
            description="Second",
            required_rights=[],
        )

    assert exc.value.message_key == ERROR_REPORTING_FILE_INCORRECT_TYPE
    session.expire_all()
    stored = get_template(session, original.id)
    assert stored.description == "First"
    assert [parameter.name for parameter in stored.parameters] == ["Region", "Facility"]


def test_insert_template_stores_new_template(session):
    template = insert_template(session, _new_template(), _file())

    assert template.id is not None
    assert template.type == "Stock"
    assert template.required_rights == ["REPORTS_VIEW"]
    assert len(template.parameters) == 2


def test_insert_template_rejects_taken_names(session):
    insert_template(session, _new_template(), _file())

    with pytest.raises(ReportingError) as exc:
        insert_template(session, _new_template(), _file())

    assert exc.value.message_key == ERROR_REPORTING_TEMPLATE_EXIST
    assert exc.value.params == ("Stock summary",)


def test_replace_template_creates_a_new_record(session):
    original = insert_template(session, _new_template(), _file())

    replacement = replace_template(
        session, _new_template(description="Replacement"), _file(_period_report())
    )

    assert replacement.id != original.id
    assert replacement.description == "Replacement"
    assert [parameter.name for parameter in replacement.parameters] == ["period"]
    repository = TemplateRepository(session)
    assert repository.get(original.id) is None
    assert [template.id for template in repository.list()] == [replacement.id]


def test_replace_template_reassigns_identity_of_reused_entities(session):
    original = insert_template(session, _new_template(), _file())
    reused = TemplateRepository(session).get(original.id)

    replacement = replace_template(session, reused, _file())

    assert replacement.id != original.id


def test_replace_template_without_existing_template_inserts_it(session):
    template = replace_template(session, _new_template(), _file())

    assert get_template(session, template.id).name == "Stock summary"


def test_replace_template_failure_keeps_existing_template(session):
    original = insert_template(session, _new_template(), _file())

    with pytest.raises(ReportingError):
        replace_template(session, _new_template(), _file(b"<broken"))

    assert get_template(session, original.id).name == "Stock summary"


def test_get_template_raises_when_missing(session):
    with pytest.raises(ReportingError) as exc:
        get_template(session, "missing")

    assert exc.value.message_key == ERROR_REPORTING_TEMPLATE_NOT_FOUND


def test_delete_template_removes_it(session):
    template = insert_template(session, _new_template(), _file())

    delete_template(session, template.id)

    assert TemplateRepository(session).get(template.id) is None


def test_list_templates_filters_by_rights(session):
    insert_template(session, _new_template("Open", required_rights=[]), _file())
    insert_template(session, _new_template("Stock", required_rights=["REPORTS_VIEW"]), _file())
    insert_template(
        session,
        _new_template("Cards", required_rights=["REPORTS_VIEW", "STOCK_CARDS_VIEW"]),
        _file(),
    )

    assert [template.name for template in list_templates(session)] == ["Cards", "Open", "Stock"]
    visible = list_templates(session, rights={"REPORTS_VIEW"})
    assert [template.name for template in visible] == ["Open", "Stock"]


def test_ensure_template_access_names_the_first_missing_right():
    template = _new_template(required_rights=["REPORTS_VIEW", "STOCK_CARDS_VIEW"])

    ensure_template_access(template, {"REPORTS_VIEW", "STOCK_CARDS_VIEW"})
    with pytest.raises(PermissionMessageError) as exc:
        ensure_template_access(template, {"STOCK_CARDS_VIEW"})

    assert exc.value.message_key == ERROR_PERMISSION_MISSING
    assert exc.value.params == ("REPORTS_VIEW",)
