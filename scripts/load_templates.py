"""Utility script to load .jrxml report templates from disk."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from reporting.application.use_cases.templates import (
    ReportFile,
    insert_template,
    replace_template,
    validate_required_rights,
)
from reporting.config import get_settings
from reporting.domain.entities import ReportTemplate
from reporting.domain.exceptions import ReportingError, ValidationMessageError
from reporting.infrastructure.database import SessionLocal, initialize_database

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the template loader."""

    parser = argparse.ArgumentParser(
        description="Load report templates from .jrxml files into the database.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Archivos .jrxml a cargar")
    parser.add_argument(
        "--right",
        dest="rights",
        action="append",
        default=[],
        help="Permiso requerido por las plantillas (se puede repetir)",
    )
    parser.add_argument(
        "--description",
        default=None,
        help="Descripción asignada a las plantillas cargadas",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Falla si ya existe una plantilla con el mismo nombre en lugar de reemplazarla.",
    )
    return parser.parse_args()


def load_template(session, path: Path, *, rights: list[str], description: str | None, strict: bool):
    """Store the template defined in ``path`` named after the file stem."""

    template = ReportTemplate(
        id=None,
        name=path.stem,
        type=get_settings().default_report_type,
        description=description,
    )
    template.replace_required_rights(rights)
    with path.open("rb") as stream:
        report_file = ReportFile(filename=path.name, stream=stream)
        if strict:
            return insert_template(session, template, report_file)
        return replace_template(session, template, report_file)


def main() -> None:
    """Load every template given on the command line."""

    args = parse_args()
    logging.basicConfig(level=get_settings().log_level.upper())

    initialize_database()

    failures = 0
    session = SessionLocal()
    try:
        try:
            validate_required_rights(session, args.rights)
        except ValidationMessageError as exc:
            raise SystemExit(exc.message) from exc

        for path in args.paths:
            try:
                template = load_template(
                    session,
                    path,
                    rights=args.rights,
                    description=args.description,
                    strict=args.strict,
                )
            except ReportingError as exc:
                session.rollback()
                failures += 1
                logger.error("No se pudo cargar %s: %s", path, exc.message)
                continue
            print(f"Plantilla '{template.name}' cargada con id {template.id}")
    finally:
        session.close()

    if failures:
        raise SystemExit(f"{failures} plantilla(s) no se pudieron cargar.")


if __name__ == "__main__":
    main()
