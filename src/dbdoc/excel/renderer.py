"""Render catalog column metadata as a table-definition workbook.

Each table gets a title row (English/Korean name pair), a header row and one
row per column, followed by one blank row before the next table.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from io import BytesIO

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from dbdoc.db.models import ColumnRecord
from dbdoc.excel import styles
from dbdoc.excel.styles import CellStyle

SHEET_TITLE = "DB_Schema"
ROW_HEIGHT = 15

# No, 컬럼명, 속성명, 데이터 타입, NULL 허용, 자동증가, KEY, 기본값, Comment
# widths in 1/256ths of a character
COLUMN_WIDTH_UNITS = [3000, 5000, 4000, 5000, 4000, 4000, 4000, 4000, 6000]

HEADERS = ["No", "컬럼명", "속성명", "데이터 타입", "NULL 허용", "자동증가", "KEY", "기본값", "Comment"]

TABLE_NAME_EN_LABEL = "테이블 명 영문"
TABLE_NAME_KO_LABEL = "테이블 명 한글"


def group_by_table(records: Iterable[ColumnRecord]) -> dict[str, list[ColumnRecord]]:
    """Partition records by table name, keeping first-seen table order."""
    groups: dict[str, list[ColumnRecord]] = {}
    for record in records:
        groups.setdefault(record.table_name, []).append(record)
    return groups


def _merged(ws: Worksheet, row: int, first_col: int, last_col: int, value: str, style: CellStyle) -> None:
    ws.cell(row=row, column=first_col, value=value)
    if last_col > first_col:
        ws.merge_cells(start_row=row, start_column=first_col, end_row=row, end_column=last_col)
    for col in range(first_col, last_col + 1):
        style.apply(ws.cell(row=row, column=col))


def _write_cell(ws: Worksheet, row: int, col: int, value, style: CellStyle) -> None:
    style.apply(ws.cell(row=row, column=col, value=value))


def write_title_row(ws: Worksheet, row: int, table_name: str, table_comment: str) -> None:
    """Write the English/Korean table name band."""
    _merged(ws, row, 1, 2, TABLE_NAME_EN_LABEL, styles.LABEL)
    _merged(ws, row, 3, 5, table_name, styles.VALUE)
    _merged(ws, row, 6, 8, TABLE_NAME_KO_LABEL, styles.LABEL)
    _write_cell(ws, row, 9, table_comment, styles.VALUE)
    ws.row_dimensions[row].height = ROW_HEIGHT


def write_header_row(ws: Worksheet, row: int) -> None:
    for col_idx, header in enumerate(HEADERS, 1):
        _write_cell(ws, row, col_idx, header, styles.HEADER)
    ws.row_dimensions[row].height = ROW_HEIGHT


def write_column_row(ws: Worksheet, row: int, no: int, column: ColumnRecord) -> None:
    """Write one column definition."""
    values = [
        (no, styles.BODY_CENTER),
        (column.column_name, styles.BODY),
        ("", styles.BODY),  # 속성명, filled in by hand
        (column.column_type, styles.BODY_CENTER),
        (column.is_nullable, styles.BODY_CENTER),
        ("YES" if column.auto_increment else "", styles.BODY_CENTER),
        (column.column_key, styles.BODY_CENTER),
        (column.column_default or "", styles.BODY_CENTER),
        (column.column_comment or "", styles.BODY),
    ]
    for col_idx, (value, style) in enumerate(values, 1):
        _write_cell(ws, row, col_idx, value, style)
    ws.row_dimensions[row].height = ROW_HEIGHT


def write_table(ws: Worksheet, row: int, table_name: str, columns: Sequence[ColumnRecord]) -> int:
    """Write one table section starting at ``row``.

    Returns the row where the next section starts, leaving one blank row.
    """
    write_title_row(ws, row, table_name, columns[0].table_comment)
    write_header_row(ws, row + 1)
    row += 2
    for no, column in enumerate(columns, 1):
        write_column_row(ws, row, no, column)
        row += 1
    return row + 1


def write_schema_sheet(ws: Worksheet, groups: Mapping[str, Sequence[ColumnRecord]]) -> None:
    for i, units in enumerate(COLUMN_WIDTH_UNITS, 1):
        ws.column_dimensions[get_column_letter(i)].width = units / 256

    row = 1
    for table_name, columns in groups.items():
        row = write_table(ws, row, table_name, columns)


def render_workbook(groups: Mapping[str, Sequence[ColumnRecord]]) -> Workbook:
    """Build a single-sheet workbook for grouped column records."""
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE
    write_schema_sheet(ws, groups)
    return wb


def render_excel(records: Iterable[ColumnRecord]) -> bytes:
    """Render ordered column records to .xlsx bytes."""
    wb = render_workbook(group_by_table(records))
    buffer = BytesIO()
    wb.save(buffer)
    wb.close()
    return buffer.getvalue()
