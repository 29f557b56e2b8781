"""Read column metadata from a MySQL/MariaDB information_schema catalog.

Uses pyodbc with the MySQL (or MariaDB) ODBC driver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from dbdoc.config import InvalidConfiguration, Settings
from dbdoc.db.models import ColumnRecord

if TYPE_CHECKING:
    import pyodbc

COLUMNS_QUERY = """
SELECT
       c.TABLE_NAME AS TABLE_NAME,
       t.TABLE_COMMENT AS TABLE_COMMENT,
       c.COLUMN_NAME AS COLUMN_NAME,
       c.COLUMN_TYPE AS COLUMN_TYPE,
       c.IS_NULLABLE AS IS_NULLABLE,
       c.COLUMN_KEY AS COLUMN_KEY,
       c.EXTRA AS EXTRA,
       c.COLUMN_DEFAULT AS COLUMN_DEFAULT,
       c.COLUMN_COMMENT AS COLUMN_COMMENT
FROM information_schema.columns c
JOIN information_schema.tables t
  ON c.TABLE_SCHEMA = t.TABLE_SCHEMA
 AND c.TABLE_NAME = t.TABLE_NAME
WHERE c.TABLE_SCHEMA = ?
ORDER BY c.TABLE_NAME, c.ORDINAL_POSITION
"""

DEFAULT_PORT = 3306


def _connection_string(settings: Settings) -> str:
    """Build an ODBC connection string from the datasource settings."""
    # "jdbc:mariadb://host:3306/db" -> "mariadb://host:3306/db"
    url = settings.datasource_url.removeprefix("jdbc:")
    parts = urlsplit(url)
    if not parts.hostname:
        raise InvalidConfiguration(f"No host in DataSource URL: {settings.datasource_url}")
    fields = {
        "DRIVER": f"{{{settings.odbc_driver}}}",
        "SERVER": parts.hostname,
        "PORT": str(parts.port or DEFAULT_PORT),
        "DATABASE": settings.schema_name,
    }
    if settings.username:
        fields["UID"] = settings.username
    if settings.password:
        fields["PWD"] = settings.password
    return "".join(f"{key}={value};" for key, value in fields.items())


def connect(settings: Settings) -> pyodbc.Connection:
    """Open a read-only connection to the configured database.

    Parameters
    ----------
    settings : Settings
        Datasource URL, credentials and ODBC driver name.

    Returns
    -------
    pyodbc.Connection
        An open ODBC connection.

    Raises
    ------
    InvalidConfiguration
        If the URL has no host or no schema segment.
    pyodbc.Error
        If the ODBC connection fails.
    """
    import pyodbc

    return pyodbc.connect(_connection_string(settings), readonly=True)


def read_columns(conn: pyodbc.Connection, schema_name: str) -> list[ColumnRecord]:
    """List every column of every table in a schema.

    Parameters
    ----------
    conn : pyodbc.Connection
        An open database connection.
    schema_name : str
        Catalog schema (database) to describe.

    Returns
    -------
    list[ColumnRecord]
        Ordered by table name, then by ordinal position within the table.
    """
    cursor = conn.cursor()
    cursor.execute(COLUMNS_QUERY, schema_name)
    columns = []
    for row in cursor.fetchall():
        (
            table_name,
            table_comment,
            column_name,
            column_type,
            is_nullable,
            column_key,
            extra,
            column_default,
            column_comment,
        ) = row
        columns.append(
            ColumnRecord(
                table_name=table_name,
                table_comment=table_comment,
                column_name=column_name,
                column_type=column_type,
                is_nullable=is_nullable,
                column_key=column_key,
                extra=extra,
                column_default=column_default,
                column_comment=column_comment,
            )
        )
    return columns
