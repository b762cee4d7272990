"""
models.py — Python dataclasses for the farm designer.

CropTile is the crop descriptor placed on cells, GridConfig holds the grid
resolution and the physical land dimensions, Brush is the active selection.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class CropTile:
    """Crop descriptor painted onto grid cells."""
    id: str
    type: str = ""
    name: str = ""
    color: str = "#4CAF50"
    icon: str = "🌱"
    description: str = ""

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'name': self.name,
            'color': self.color,
            'icon': self.icon,
            'description': self.description,
        }


@dataclass
class GridConfig:
    """Grid resolution plus land dimensions in meters."""
    rows: int = 10
    cols: int = 10
    land_width: int = 100
    land_length: int = 100

    @property
    def cell_width(self) -> float:
        """Width of one cell in meters: land width / column count."""
        return self.land_width / self.cols

    @property
    def cell_length(self) -> float:
        """Length of one cell in meters: land length / row count."""
        return self.land_length / self.rows

    @property
    def cell_area(self) -> float:
        return self.cell_width * self.cell_length

    @property
    def total_area(self) -> int:
        return self.land_width * self.land_length

    @property
    def hectares(self) -> float:
        return self.total_area / 10000

    def to_dict(self):
        return {
            'rows': self.rows,
            'cols': self.cols,
            'land_width': self.land_width,
            'land_length': self.land_length,
            'cell_width': self.cell_width,
            'cell_length': self.cell_length,
            'cell_area': self.cell_area,
            'total_area': self.total_area,
        }


@dataclass
class Brush:
    """Active selection: one crop, several crops, or the eraser.

    The single brush and the multi-selection are mutually exclusive;
    choosing one clears the other.
    """
    selected_crop: Optional[str] = None
    selected_ids: List[str] = field(default_factory=list)

    @property
    def mode(self) -> str:
        if self.selected_ids:
            return 'multi'
        if self.selected_crop:
            return 'single'
        return 'eraser'

    def select_single(self, crop_id):
        self.selected_crop = crop_id
        self.selected_ids = []

    def toggle(self, crop_id):
        """Add or remove a crop from the multi-selection."""
        if crop_id in self.selected_ids:
            self.selected_ids.remove(crop_id)
        else:
            self.selected_ids.append(crop_id)
        self.selected_crop = None

    def erase(self):
        self.selected_crop = None
        self.selected_ids = []

    def multi_palette(self, catalog) -> List[CropTile]:
        """Selected crops in catalog order."""
        chosen = set(self.selected_ids)
        return [crop for crop in catalog if crop.id in chosen]

    def single_crop(self, catalog) -> Optional[CropTile]:
        if not self.selected_crop:
            return None
        for crop in catalog:
            if crop.id == self.selected_crop:
                return crop
        return None

    def palette(self, catalog) -> List[CropTile]:
        """Palette used by smart fill: the multi-selection, else the single brush."""
        multi = self.multi_palette(catalog)
        if multi:
            return multi
        single = self.single_crop(catalog)
        return [single] if single else []

    def to_dict(self):
        return {
            'mode': self.mode,
            'selected_crop': self.selected_crop,
            'selected_ids': list(self.selected_ids),
        }
