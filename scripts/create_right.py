"""Utility script to register a right in the database."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from reporting.application.use_cases.rights import create_right
from reporting.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for right creation."""

    parser = argparse.ArgumentParser(
        description="Register a right that report templates can require.",
    )
    parser.add_argument("name", help="Nombre del permiso, por ejemplo REPORTS_VIEW")
    parser.add_argument(
        "--type",
        default="REPORTS",
        help="Tipo del permiso (por defecto: REPORTS)",
    )
    parser.add_argument(
        "--description",
        default=None,
        help="Descripción del permiso (opcional)",
    )
    return parser.parse_args()


def main() -> None:
    """Create a right using the provided command line arguments."""

    args = parse_args()

    initialize_database()

    session = SessionLocal()
    try:
        right = create_right(
            session,
            name=args.name,
            type=args.type,
            description=args.description,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"No se pudo crear el permiso: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error al guardar el permiso en la base de datos: {exc}") from exc
    else:
        print(
            "Permiso creado exitosamente:\n"
            f"  ID: {right.id}\n"
            f"  Nombre: {right.name}\n"
            f"  Tipo: {right.type or '-'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
