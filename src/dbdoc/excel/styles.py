"""Cell styles used by the schema workbook."""

from dataclasses import dataclass

from openpyxl.cell.cell import Cell, MergedCell
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

SHADED_COLOR = "C0C0C0"  # 25% grey
PLAIN_COLOR = "FFFFFF"

THIN = Side(style="thin")
ALL_BORDERS = Border(left=THIN, right=THIN, top=THIN, bottom=THIN)


@dataclass(frozen=True)
class CellStyle:
    """Fill, weight and horizontal alignment of a bordered cell."""

    shaded: bool
    bold: bool
    horizontal: str

    @property
    def fill(self) -> PatternFill:
        color = SHADED_COLOR if self.shaded else PLAIN_COLOR
        return PatternFill(start_color=color, end_color=color, fill_type="solid")

    @property
    def font(self) -> Font:
        return Font(bold=self.bold)

    @property
    def alignment(self) -> Alignment:
        return Alignment(horizontal=self.horizontal, vertical="center")

    def apply(self, cell: Cell | MergedCell) -> None:
        cell.fill = self.fill
        cell.font = self.font
        cell.alignment = self.alignment
        cell.border = ALL_BORDERS


LABEL = CellStyle(shaded=True, bold=True, horizontal="center")
VALUE = CellStyle(shaded=False, bold=False, horizontal="left")
HEADER = CellStyle(shaded=True, bold=True, horizontal="center")
BODY = CellStyle(shaded=False, bold=False, horizontal="left")
BODY_CENTER = CellStyle(shaded=False, bold=False, horizontal="center")
