"""
advisory_engine.py — Seed, water and spacing guidance derived from the grid.

Everything here is a pure function of the planting grid and the grid
configuration, recomputed on every request. Lookup tables are passed in as
parameters so they can be swapped in tests.

Per planted crop:
- area  = cell count × cell width × cell length (m²)
- seeds = ceil(area × seeds-per-m² for the crop, default 20)
- water = ceil(area × 0.8) liters per day, same coefficient for every crop
"""

import math
from collections import OrderedDict


# Seeds (or seedlings) per m²; crops not listed use DEFAULT_SEED_DENSITY
SEED_DENSITY = {
    'tomato': 4,
    'potato': 5,
    'carrot': 50,
}
DEFAULT_SEED_DENSITY = 20

WATER_LITERS_PER_M2 = 0.8

# (crop_a, crop_b, advice) appended when both crops are on the grid
COMPATIBILITY_RULES = (
    ('wheat', 'corn', "نصيحة: افصل بين القمح والذرة بممر عريض (3 متر) لضمان عدم تداخل الجذور."),
)


def group_crops(grid, config):
    """
    Count planted cells per crop inside the configured bounds.

    Returns:
        OrderedDict crop_id → {'crop': CropTile, 'count': int}, in row-major
        order of first appearance.
    """
    groups = OrderedDict()
    for _, crop in grid.in_bounds(config.rows, config.cols):
        if crop.id not in groups:
            groups[crop.id] = {'crop': crop, 'count': 0}
        groups[crop.id]['count'] += 1
    return groups


def seeds_needed(area, crop_id, seed_density=None, default_density=DEFAULT_SEED_DENSITY):
    density_table = SEED_DENSITY if seed_density is None else seed_density
    return math.ceil(area * density_table.get(crop_id, default_density))


def water_needed(area, water_per_m2=WATER_LITERS_PER_M2):
    """Estimated daily water use in liters."""
    return math.ceil(area * water_per_m2)


def summarize_grid(grid, config, seed_density=None, water_per_m2=WATER_LITERS_PER_M2):
    """Numeric summary of the plan: per-crop area/seeds/water and totals."""
    cell_area = config.cell_area
    groups = []
    planted_cells = 0

    for crop_id, group in group_crops(grid, config).items():
        count = group['count']
        area = count * config.cell_width * config.cell_length
        planted_cells += count
        groups.append({
            'crop_id': crop_id,
            'name': group['crop'].name,
            'icon': group['crop'].icon,
            'count': count,
            'area': area,
            'seeds': seeds_needed(area, crop_id, seed_density),
            'water_liters': water_needed(area, water_per_m2),
        })

    return {
        'planted_cells': planted_cells,
        'planted_area': round(planted_cells * cell_area, 1),
        'total_area': config.total_area,
        'cell_width': config.cell_width,
        'cell_length': config.cell_length,
        'cell_area': cell_area,
        'groups': groups,
    }


def generate_advice(grid, config, seed_density=None, compatibility_rules=None,
                    water_per_m2=WATER_LITERS_PER_M2):
    """
    Build the advisory lines shown next to the grid.

    Args:
        grid: PlantingGrid.
        config: GridConfig with land dimensions.
        seed_density: crop_id → seeds per m² (defaults to SEED_DENSITY).
        compatibility_rules: iterable of (crop_a, crop_b, message).
        water_per_m2: liters per m² per day.

    Returns:
        List of strings. An empty grid yields one orientation line.
    """
    rules = COMPATIBILITY_RULES if compatibility_rules is None else compatibility_rules
    summary = summarize_grid(grid, config, seed_density, water_per_m2)

    if not summary['groups']:
        return [
            f"أرضك بمساحة {config.total_area} متر مربع ({config.hectares:.2f} هكتار). "
            f"اختر بذرة وابدأ بالزراعة!"
        ]

    advice = []
    for group in summary['groups']:
        advice.append(
            f"مساحة {group['name']}: {group['area']:.1f}م². "
            f"تحتاج لزراعتها حوالي {group['seeds']:,} بذرة/شتلة."
        )
        advice.append(
            f"الاستهلاك المائي التقديري لـ {group['name']}: {group['water_liters']} لتر/يوم."
        )

    present = {group['crop_id'] for group in summary['groups']}
    for crop_a, crop_b, message in rules:
        if crop_a in present and crop_b in present:
            advice.append(message)

    advice.append(f"كل مربع تنقر عليه يزرع مساحة {config.cell_area:.1f} متر مربع.")
    return advice


def axis_markers(count, step):
    """Meter labels along one grid axis, halves rounded up."""
    return [math.floor(i * step + 0.5) for i in range(count)]
