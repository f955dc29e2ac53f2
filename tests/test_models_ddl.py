import pytest
from sqlalchemy.dialects import mssql, mysql, postgresql, sqlite
from sqlalchemy.schema import CreateTable

from reporting.infrastructure.database import Base
from reporting.infrastructure import models  # noqa: F401  # register every table


@pytest.mark.parametrize(
    "dialect",
    [sqlite.dialect(), postgresql.dialect(), mssql.dialect(), mysql.dialect()],
    ids=["sqlite", "postgresql", "mssql", "mysql"],
)
def test_every_table_renders_on_supported_databases(dialect):
    for table in Base.metadata.sorted_tables:
        ddl = str(CreateTable(table).compile(dialect=dialect))

        assert table.name in ddl


def test_json_columns_render_as_nvarchar_max_on_sql_server():
    ddl = str(CreateTable(Base.metadata.tables["report_template"]).compile(dialect=mssql.dialect()))

    assert "required_rights NVARCHAR(max)" in ddl
