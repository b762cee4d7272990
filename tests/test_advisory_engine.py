"""
tests/test_advisory_engine.py — Tests for seed/water advice and plan summary.

Tests cover:
- Orientation line for an empty grid
- Per-crop seed and water lines
- Seed density table and default density
- Wheat/corn spacing rule
- Swappable lookup tables
- Area conservation across crop groups
"""

import math

import pytest

from advisory_engine import (
    generate_advice, summarize_grid, seeds_needed, water_needed, axis_markers,
    DEFAULT_SEED_DENSITY,
)
from grid_model import PlantingGrid
from models import CropTile, GridConfig


WHEAT = CropTile(id='wheat', name='قمح')
CORN = CropTile(id='corn', name='ذرة')
TOMATO = CropTile(id='tomato', name='طماطم')
CARROT = CropTile(id='carrot', name='جزر')
BARLEY = CropTile(id='custom-1', name='شعير')


@pytest.fixture
def config():
    return GridConfig(rows=10, cols=10, land_width=100, land_length=100)


def test_empty_grid_orientation(config):
    advice = generate_advice(PlantingGrid(), config)
    assert len(advice) == 1
    assert '10000' in advice[0]
    assert '1.00' in advice[0]


def test_empty_grid_small_land():
    advice = generate_advice(PlantingGrid(), GridConfig(rows=1, cols=1, land_width=1, land_length=1))
    assert len(advice) == 1
    assert '0.00' in advice[0]


def test_out_of_bounds_cells_ignored(config):
    grid = PlantingGrid()
    grid.set_cell(20, 20, WHEAT)
    assert len(generate_advice(grid, config)) == 1


def test_single_crop_lines(config):
    grid = PlantingGrid()
    grid.set_cell(1, 1, WHEAT)
    grid.set_cell(1, 2, WHEAT)
    advice = generate_advice(grid, config)

    # seed line, water line, cell-area line
    assert len(advice) == 3
    assert '200.0' in advice[0]
    assert '4,000' in advice[0]
    assert '160' in advice[1]
    assert '100.0' in advice[2]


def test_two_crops_without_rule(config):
    grid = PlantingGrid()
    grid.set_cell(1, 1, TOMATO)
    grid.set_cell(2, 2, CARROT)
    advice = generate_advice(grid, config)
    assert len(advice) == 5
    assert advice[0].startswith('مساحة طماطم')
    assert advice[2].startswith('مساحة جزر')


def test_wheat_corn_rule(config):
    grid = PlantingGrid()
    grid.set_cell(1, 1, WHEAT)
    grid.set_cell(5, 5, CORN)
    advice = generate_advice(grid, config)
    assert len(advice) == 6
    assert '3 متر' in advice[4]


def test_rule_needs_both_crops(config):
    grid = PlantingGrid()
    grid.set_cell(1, 1, WHEAT)
    advice = generate_advice(grid, config)
    assert not any('3 متر' in line for line in advice)


def test_custom_rules_and_density(config):
    grid = PlantingGrid()
    grid.set_cell(1, 1, TOMATO)
    grid.set_cell(1, 2, CARROT)
    advice = generate_advice(
        grid, config,
        seed_density={'tomato': 1},
        compatibility_rules=[('tomato', 'carrot', 'rule-hit')],
        water_per_m2=2,
    )
    assert '100 ' in advice[0]  # 100 m² × 1 seed
    assert '200 ' in advice[1]  # 100 m² × 2 liters
    assert 'rule-hit' in advice


class TestSeedsAndWater:

    @pytest.mark.parametrize('crop_id,density', [
        ('tomato', 4), ('potato', 5), ('carrot', 50), ('wheat', 20), ('lettuce', 20), ('custom-9', 20),
    ])
    def test_density_table(self, crop_id, density):
        assert seeds_needed(10, crop_id) == 10 * density

    def test_seeds_round_up(self):
        assert seeds_needed(0.01, 'wheat') == 1

    def test_water_round_up(self):
        assert water_needed(1) == 1
        assert water_needed(10) == 8

    def test_default_density_constant(self):
        assert DEFAULT_SEED_DENSITY == 20


class TestSummary:

    def test_area_sum_matches_planted_cells(self):
        config = GridConfig(rows=7, cols=3, land_width=37, land_length=91)
        grid = PlantingGrid()
        for cell, crop in [((0, 0), WHEAT), ((1, 2), CORN), ((6, 1), WHEAT), ((3, 1), BARLEY)]:
            grid.set_cell(*cell, crop)
        summary = summarize_grid(grid, config)

        total = sum(group['area'] for group in summary['groups'])
        assert total == pytest.approx(4 * config.cell_width * config.cell_length)
        assert summary['planted_cells'] == 4

    def test_group_counts(self, config):
        grid = PlantingGrid()
        grid.set_cell(1, 1, WHEAT)
        grid.set_cell(2, 2, WHEAT)
        grid.set_cell(3, 3, BARLEY)
        groups = {g['crop_id']: g for g in summarize_grid(grid, config)['groups']}
        assert groups['wheat']['count'] == 2
        assert groups['custom-1']['seeds'] == math.ceil(100 * 20)

    def test_empty(self, config):
        summary = summarize_grid(PlantingGrid(), config)
        assert summary['groups'] == []
        assert summary['planted_area'] == 0
        assert summary['total_area'] == 10000


def test_axis_markers():
    assert axis_markers(4, 2.5) == [0, 3, 5, 8]
    assert axis_markers(3, 10) == [0, 10, 20]
