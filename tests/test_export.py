"""
tests/test_export.py — Tests for the Excel export of the planting plan.
"""

from io import BytesIO

import openpyxl
import pytest

from app import create_app
from grid_model import PlantingGrid
from models import CropTile, GridConfig
from utils.export import generate_excel


WHEAT = CropTile(id='wheat', name='قمح', color='#F5DEB3', icon='🌾')
CORN = CropTile(id='corn', name='ذرة', color='#FFD700', icon='🌽')


def test_empty_grid_has_nothing_to_export():
    buffer, filename = generate_excel(PlantingGrid(), GridConfig())
    assert buffer is None
    assert filename is None


def test_workbook_layout():
    config = GridConfig(rows=5, cols=5, land_width=50, land_length=50)
    grid = PlantingGrid()
    grid.set_cell(1, 1, WHEAT)
    grid.set_cell(2, 3, CORN)

    buffer, filename = generate_excel(grid, config)
    assert filename == 'farm_plan_5x5.xlsx'

    wb = openpyxl.load_workbook(BytesIO(buffer.getvalue()))
    assert wb.sheetnames == ['المخطط', 'الملخص']

    plan = wb['المخطط']
    # Worksheet cells are offset by the marker row/column
    assert plan.cell(row=3, column=3).value == '🌾 قمح'
    assert plan.cell(row=4, column=5).value == '🌽 ذرة'
    assert plan.cell(row=2, column=2).value == 'ممر'
    assert plan.cell(row=1, column=3).value == '10م'

    summary = wb['الملخص']
    assert summary.cell(row=2, column=1).value == 'قمح'
    assert summary.cell(row=2, column=2).value == 1
    assert summary.cell(row=2, column=3).value == pytest.approx(100.0)
    assert summary.cell(row=2, column=4).value == 2000


@pytest.fixture
def client():
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'dev-key-for-testing',
        'WTF_CSRF_ENABLED': False,
    })
    with app.test_client() as client:
        yield client


def test_export_route_redirects_when_empty(client):
    rv = client.get('/export/excel')
    assert rv.status_code == 302


def test_export_route_downloads(client):
    client.post('/api/designer/brush', json={'action': 'select', 'crop_id': 'wheat'})
    client.post('/api/designer/smart-fill')
    rv = client.get('/export/excel')
    assert rv.status_code == 200
    assert rv.mimetype == 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    assert 'farm_plan_10x10.xlsx' in rv.headers['Content-Disposition']
