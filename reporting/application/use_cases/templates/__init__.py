"""Template-related use cases."""

from .delete_template import delete_template
from .file_validation import REPORT_TYPE_PROPERTY, validate_file_and_set_data
from .get_template import get_template
from .insert_template import insert_template
from .list_templates import list_templates
from .load_compiled_report import load_compiled_report
from .map_request_parameters import map_request_parameters_to_template
from .replace_template import replace_template
from .report_file import ReportFile
from .rights import (
    ensure_template_access,
    has_template_access,
    validate_required_rights,
)
from .save_template import save_template

__all__ = [
    "REPORT_TYPE_PROPERTY",
    "ReportFile",
    "delete_template",
    "ensure_template_access",
    "get_template",
    "has_template_access",
    "insert_template",
    "list_templates",
    "load_compiled_report",
    "map_request_parameters_to_template",
    "replace_template",
    "save_template",
    "validate_file_and_set_data",
    "validate_required_rights",
]
