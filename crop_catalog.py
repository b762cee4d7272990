"""
crop_catalog.py — Seed box of crops available to the designer.

Holds the default crops and the crops added by the user during the session.
The catalog only grows; custom crops get a timestamp-based id and the
"custom" category label.
"""

import time

from models import CropTile


CUSTOM_CATEGORY = "خاص"
CUSTOM_DESCRIPTION = "محصول مخصص"
DEFAULT_ICON = "🌱"
DEFAULT_COLOR = "#4CAF50"

DEFAULT_CROPS = (
    CropTile(id="wheat", type="حبوب", name="قمح", color="#F5DEB3", icon="🌾", description="حبوب صلبة"),
    CropTile(id="tomato", type="خضروات", name="طماطم", color="#FF6347", icon="🍅", description="شتلات طماطم"),
    CropTile(id="potato", type="جذور", name="بطاطا", color="#D2B48C", icon="🥔", description="درنات بطاطس"),
    CropTile(id="carrot", type="خضروات", name="جزر", color="#FFA500", icon="🥕", description="بذور جزر"),
    CropTile(id="corn", type="حبوب", name="ذرة", color="#FFD700", icon="🌽", description="بذور ذرة"),
    CropTile(id="lettuce", type="خضروات", name="خس", color="#90EE90", icon="🥬", description="شتلات خس"),
)


class CropCatalog:
    """Ordered list of crop descriptors for one designer session."""

    def __init__(self, crops=None, clock=None):
        self._crops = list(crops if crops is not None else DEFAULT_CROPS)
        self._clock = clock or (lambda: int(time.time() * 1000))

    def __iter__(self):
        return iter(self._crops)

    def __len__(self):
        return len(self._crops)

    def get(self, crop_id):
        for crop in self._crops:
            if crop.id == crop_id:
                return crop
        return None

    def to_list(self):
        return [crop.to_dict() for crop in self._crops]

    def _next_custom_id(self):
        stamp = self._clock()
        crop_id = f"custom-{stamp}"
        # Two crops added within the same millisecond
        while self.get(crop_id) is not None:
            stamp += 1
            crop_id = f"custom-{stamp}"
        return crop_id

    def add_custom_crop(self, name, icon=DEFAULT_ICON, color=DEFAULT_COLOR):
        """
        Append a user-defined crop to the catalog.

        Args:
            name: Display name (required, stripped).
            icon: Emoji glyph shown on the tile.
            color: Tile color as #RRGGBB.

        Returns:
            (CropTile, None) on success, or (None, error_message) on failure.
        """
        name = name.strip() if isinstance(name, str) else ''
        if not name:
            return None, "يرجى إدخال اسم المحصول"

        crop = CropTile(
            id=self._next_custom_id(),
            type=CUSTOM_CATEGORY,
            name=name,
            icon=(icon.strip() if isinstance(icon, str) else '') or DEFAULT_ICON,
            color=color if isinstance(color, str) and color else DEFAULT_COLOR,
            description=CUSTOM_DESCRIPTION,
        )
        self._crops.append(crop)
        return crop, None
