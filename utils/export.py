"""
utils/export.py — Excel export of the planting plan using openpyxl.

Generates an .xlsx workbook with two sheets:
- "المخطط": the grid itself, one worksheet cell per planted cell, filled with
  the crop color; empty path cells are labelled "ممر"
- "الملخص": one row per crop with cells, area, seeds and water
"""

from io import BytesIO
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from advisory_engine import axis_markers, summarize_grid
from allocation_engine import is_path_cell


HEADER_FONT = Font(name='Calibri', bold=True, color='FFFFFF', size=11)
HEADER_FILL = PatternFill(start_color='2D5A27', end_color='2D5A27', fill_type='solid')
HEADER_ALIGNMENT = Alignment(horizontal='center', vertical='center', wrap_text=True)
HEADER_BORDER = Border(
    bottom=Side(style='thin', color='1B3A17'),
    right=Side(style='thin', color='E2E8F0'),
)
CELL_BORDER = Border(
    bottom=Side(style='thin', color='E2E8F0'),
    right=Side(style='thin', color='E2E8F0'),
)
CELL_ALIGNMENT = Alignment(horizontal='center', vertical='center')
PATH_FONT = Font(color='94A3B8', italic=True, size=8)


def _crop_fill(color):
    """PatternFill for a #RRGGBB crop color."""
    hex_color = color.lstrip('#').upper()
    return PatternFill(start_color=hex_color, end_color=hex_color, fill_type='solid')


def _build_grid_sheet(ws, grid, config):
    """Grid layout: header row/column carry the meter markers."""
    corner = ws.cell(row=1, column=1, value='م')
    corner.font = HEADER_FONT
    corner.fill = HEADER_FILL
    corner.alignment = HEADER_ALIGNMENT

    col_markers = axis_markers(config.cols, config.cell_width)
    row_markers = axis_markers(config.rows, config.cell_length)

    for c, meters in enumerate(col_markers):
        cell = ws.cell(row=1, column=c + 2, value=f"{meters}م")
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        cell.border = HEADER_BORDER
        ws.column_dimensions[get_column_letter(c + 2)].width = 10

    for r, meters in enumerate(row_markers):
        label = ws.cell(row=r + 2, column=1, value=f"{meters}م")
        label.font = HEADER_FONT
        label.fill = HEADER_FILL
        label.alignment = HEADER_ALIGNMENT

        for c in range(config.cols):
            crop = grid.get_cell(r, c)
            cell = ws.cell(row=r + 2, column=c + 2)
            cell.border = CELL_BORDER
            cell.alignment = CELL_ALIGNMENT
            if crop is not None:
                cell.value = f"{crop.icon} {crop.name}"
                cell.fill = _crop_fill(crop.color)
            elif is_path_cell(r, c):
                cell.value = 'ممر'
                cell.font = PATH_FONT

    ws.column_dimensions['A'].width = 8
    ws.freeze_panes = 'B2'


def _build_summary_sheet(ws, grid, config):
    """Per-crop totals, then land totals."""
    columns = ['المحصول', 'عدد المربعات', 'المساحة (م²)', 'البذور/الشتلات', 'الماء (لتر/يوم)']
    for col_idx, col_name in enumerate(columns, 1):
        cell = ws.cell(row=1, column=col_idx, value=col_name)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        cell.border = HEADER_BORDER

    summary = summarize_grid(grid, config)
    row_idx = 2
    for group in summary['groups']:
        ws.cell(row=row_idx, column=1, value=group['name']).border = CELL_BORDER
        ws.cell(row=row_idx, column=2, value=group['count']).border = CELL_BORDER
        ws.cell(row=row_idx, column=3, value=round(group['area'], 1)).border = CELL_BORDER
        ws.cell(row=row_idx, column=4, value=group['seeds']).border = CELL_BORDER
        ws.cell(row=row_idx, column=5, value=group['water_liters']).border = CELL_BORDER
        row_idx += 1

    row_idx += 1
    ws.cell(row=row_idx, column=1, value='المساحة المزروعة (م²)').font = Font(bold=True)
    ws.cell(row=row_idx, column=3, value=summary['planted_area'])
    ws.cell(row=row_idx + 1, column=1, value='المساحة الإجمالية (م²)').font = Font(bold=True)
    ws.cell(row=row_idx + 1, column=3, value=summary['total_area'])

    ws.column_dimensions['A'].width = 24
    for letter in 'BCDE':
        ws.column_dimensions[letter].width = 16
    ws.freeze_panes = 'A2'


def generate_excel(grid, config):
    """Generate an Excel workbook for the current plan.

    Returns:
        (BytesIO buffer, filename) on success, (None, None) when nothing is planted.
    """
    import openpyxl

    if len(grid) == 0:
        return None, None

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = 'المخطط'
    ws.sheet_view.rightToLeft = True
    _build_grid_sheet(ws, grid, config)

    summary_ws = wb.create_sheet(title='الملخص')
    summary_ws.sheet_view.rightToLeft = True
    _build_summary_sheet(summary_ws, grid, config)

    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)

    filename = f"farm_plan_{config.rows}x{config.cols}.xlsx"
    return buffer, filename
