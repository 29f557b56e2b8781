"""Read the configured schema and render it as a workbook."""

from __future__ import annotations

import logging
from collections.abc import Callable

from dbdoc.config import Settings
from dbdoc.db import schema_reader
from dbdoc.excel.renderer import render_excel

log = logging.getLogger(__name__)


def generate_excel(settings: Settings, connect: Callable = schema_reader.connect) -> bytes:
    """Describe every table of the configured schema as .xlsx bytes.

    The schema name is resolved before connecting, so a bad datasource URL
    fails without touching the database. Database errors propagate.
    """
    schema_name = settings.schema_name
    log.info("Reading column metadata for schema %s", schema_name)

    conn = connect(settings)
    try:
        columns = schema_reader.read_columns(conn, schema_name)
    finally:
        conn.close()

    tables = {c.table_name for c in columns}
    log.info("Rendering %d columns across %d tables", len(columns), len(tables))
    data = render_excel(columns)
    log.info("Workbook ready: %d bytes", len(data))
    return data
