import pytest

from dbdoc.db.models import ColumnRecord


def make_record(table_name: str, column_name: str, **overrides) -> ColumnRecord:
    fields = {
        "table_name": table_name,
        "table_comment": "",
        "column_name": column_name,
        "column_type": "int(11)",
        "is_nullable": "NO",
        "column_key": "",
        "extra": "",
        "column_default": None,
        "column_comment": None,
    }
    fields.update(overrides)
    return ColumnRecord(**fields)


@pytest.fixture
def users_records() -> list[ColumnRecord]:
    return [
        make_record(
            "users",
            "id",
            table_comment="User accounts",
            column_key="PRI",
            extra="auto_increment",
            column_comment="PK",
        ),
        make_record(
            "users",
            "email",
            table_comment="User accounts",
            column_type="varchar(255)",
            is_nullable="YES",
            column_comment="",
        ),
    ]


class FakeCursor:
    def __init__(self, rows):
        self.rows = rows
        self.executed = []

    def execute(self, sql, *params):
        self.executed.append((sql, params))
        return self

    def fetchall(self):
        return list(self.rows)


class FakeConnection:
    def __init__(self, rows=()):
        self.cursor_obj = FakeCursor(rows)
        self.closed = False

    def cursor(self):
        return self.cursor_obj

    def close(self):
        self.closed = True


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def fake_connection():
    return FakeConnection


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv records each key so values loaded from .env files are removed on teardown
    for key in (
        "DBDOC_DATASOURCE_URL",
        "DBDOC_DATASOURCE_USERNAME",
        "DBDOC_DATASOURCE_PASSWORD",
        "DBDOC_ODBC_DRIVER",
        "DBDOC_LOG_LEVEL",
    ):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
