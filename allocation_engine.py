"""
allocation_engine.py — Smart fill of empty cells with a path-preserving pattern.

Algorithm:
- Walk cells in row-major order
- Every 4th row and column (index % 4 == 0) is an access path and never filled
- Occupied cells are never overwritten
- Each remaining cell gets palette[filled_count % len(palette)], so the palette
  cycles evenly over the filled cells whatever was skipped in between
"""

from dataclasses import dataclass

from grid_model import PlantingGrid


PATH_SPACING = 4


@dataclass
class FillResult:
    """Outcome of a smart fill: the updated grid and how many cells were filled."""
    grid: PlantingGrid
    filled_count: int
    palette_size: int

    @property
    def level(self):
        return 'success' if self.filled_count > 0 else 'info'

    @property
    def message(self):
        if self.filled_count > 0:
            return f"تم توزيع {self.filled_count} شتلة من {self.palette_size} أنواع ذكياً"
        return "لا توجد مساحات فارغة مناسبة"


def is_path_cell(row, col, spacing=PATH_SPACING):
    """True for cells reserved as access corridors."""
    return row % spacing == 0 or col % spacing == 0


def smart_fill(grid, rows, cols, palette):
    """
    Fill every empty non-path cell, cycling through the palette.

    The input grid is left untouched; the filled copy is returned.

    Args:
        grid: Current PlantingGrid.
        rows, cols: Grid dimensions.
        palette: Ordered list of CropTile to cycle through.

    Returns:
        (FillResult, None) on success, or (None, error_message) when the
        palette is empty.
    """
    if not palette:
        return None, "يرجى اختيار نوع أو عدة أنواع من الحبوب أولاً"

    new_grid = grid.copy()
    filled_count = 0

    for row in range(rows):
        for col in range(cols):
            if is_path_cell(row, col):
                continue
            if new_grid.get_cell(row, col) is not None:
                continue

            new_grid.set_cell(row, col, palette[filled_count % len(palette)])
            filled_count += 1

    return FillResult(grid=new_grid, filled_count=filled_count, palette_size=len(palette)), None
