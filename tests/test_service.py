"""Tests for the export service."""

from io import BytesIO

import pytest
from openpyxl import load_workbook

from dbdoc.config import InvalidConfiguration, Settings
from dbdoc.service import generate_excel

USERS_ROWS = [
    ("users", "User accounts", "id", "int(11)", "NO", "PRI", "auto_increment", None, "PK"),
    ("users", "User accounts", "email", "varchar(255)", "YES", "", "", None, ""),
]


def test_generate_excel_reads_configured_schema(fake_connection):
    conn = fake_connection(USERS_ROWS)
    opened = []

    def connect(settings):
        opened.append(settings)
        return conn

    settings = Settings(datasource_url="jdbc:mariadb://localhost:3306/app_db?useUnicode=true")
    data = generate_excel(settings, connect=connect)

    assert opened == [settings]
    assert conn.cursor_obj.executed[0][1] == ("app_db",)
    assert conn.closed

    ws = load_workbook(BytesIO(data)).active
    assert ws["C1"].value == "users"
    assert ws["B4"].value == "email"


def test_generate_excel_invalid_url_never_connects():
    def connect(settings):
        raise AssertionError("should not connect")

    with pytest.raises(InvalidConfiguration):
        generate_excel(Settings(datasource_url="jdbc:mysql://localhost:3306/"), connect=connect)


def test_generate_excel_closes_connection_on_query_error(fake_connection):
    conn = fake_connection()

    def fail(*args):
        raise RuntimeError("access denied")

    conn.cursor_obj.execute = fail
    with pytest.raises(RuntimeError, match="access denied"):
        generate_excel(Settings(datasource_url="mysql://localhost/app_db"), connect=lambda s: conn)
    assert conn.closed


def test_generate_excel_empty_schema(fake_connection):
    data = generate_excel(Settings(datasource_url="mysql://localhost/empty"), connect=lambda s: fake_connection())
    ws = load_workbook(BytesIO(data)).active
    assert ws.title == "DB_Schema"
    assert not ws.merged_cells.ranges
