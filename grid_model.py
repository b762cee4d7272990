"""
grid_model.py — Sparse planting grid and manual tile painting.

The grid maps (row, col) to a CropTile. A missing key means the cell is
unplanted; removing a cell deletes the key rather than storing None.

Tile painting policy (resolve_tile_action), evaluated in order:
- Multi-selection active: crop = palette[(row * cols + col) % len(palette)],
  so re-clicking a cell with the same selection always gives the same crop
- Single crop selected: that crop
- Otherwise (eraser): the cell is removed
"""


class PlantingGrid:
    """Sparse mapping of (row, col) → CropTile.

    No bounds checking happens here; callers pass indices inside the
    configured grid. Readers that need bounds use in_bounds().
    """

    def __init__(self, cells=None):
        self._cells = dict(cells or {})

    def __len__(self):
        return len(self._cells)

    def __contains__(self, key):
        return key in self._cells

    def __eq__(self, other):
        if not isinstance(other, PlantingGrid):
            return NotImplemented
        return self._cells == other._cells

    def get_cell(self, row, col):
        return self._cells.get((row, col))

    def set_cell(self, row, col, crop):
        """Plant `crop` at (row, col), or remove the cell when crop is None."""
        if crop is not None:
            self._cells[(row, col)] = crop
        else:
            self._cells.pop((row, col), None)

    def clear(self):
        self._cells.clear()

    def items(self):
        return self._cells.items()

    def copy(self):
        return PlantingGrid(self._cells)

    def in_bounds(self, rows, cols):
        """Yield ((row, col), crop) for planted cells inside the grid, row-major."""
        for key in sorted(self._cells):
            row, col = key
            if 0 <= row < rows and 0 <= col < cols:
                yield key, self._cells[key]

    def prune(self, rows, cols):
        """Drop cells left outside the grid after a resize.

        Returns:
            Number of cells removed.
        """
        stale = [
            (row, col) for (row, col) in self._cells
            if not (0 <= row < rows and 0 <= col < cols)
        ]
        for key in stale:
            del self._cells[key]
        return len(stale)

    def to_list(self):
        """Serialize as a list of {row, col, crop_id} dicts, row-major."""
        return [
            {'row': row, 'col': col, 'crop_id': crop.id}
            for (row, col), crop in sorted(self._cells.items(), key=lambda kv: kv[0])
        ]


def resolve_tile_action(grid, row, col, cols, palette=None, single=None):
    """
    Apply one pointer interaction to a cell.

    Args:
        grid: PlantingGrid to mutate.
        row, col: Cell indices.
        cols: Column count of the grid (used for the position index).
        palette: Multi-selected crops in catalog order (may be empty).
        single: Single-selected crop, or None.

    Returns:
        The crop now planted at the cell, or None if it was erased.
    """
    if palette:
        crop = palette[(row * cols + col) % len(palette)]
    elif single is not None:
        crop = single
    else:
        crop = None

    grid.set_cell(row, col, crop)
    return crop
