"""
routes/designer.py — Farm designer page and JSON API.

Provides:
- GET  /                        — Designer page (grid, seed box, advice)
- GET  /api/designer/state      — JSON: full session state
- POST /api/designer/config     — JSON: land dimensions and grid divisions
- POST /api/designer/brush      — JSON: select / toggle / erase
- POST /api/designer/tile       — JSON: paint or erase one cell
- POST /api/designer/stroke     — JSON: paint a drag gesture (list of cells)
- POST /api/designer/smart-fill — JSON: fill empty non-path cells
- POST /api/designer/clear      — JSON: clear the grid (requires confirm)
- GET  /api/designer/advice     — JSON: advisory lines and summary
"""

from flask import Blueprint, render_template, request, jsonify, current_app

from advisory_engine import axis_markers
from allocation_engine import is_path_cell
from session_store import get_designer
from utils.validators import coerce_dimension, json_object, parse_cell

designer_bp = Blueprint('designer', __name__)


def _derived(designer):
    """Values recomputed after every mutation."""
    return {
        'advice': designer.advice(),
        'summary': designer.summary(),
    }


@designer_bp.route('/')
def index():
    """Designer page — seed box, planting grid, advisory panel."""
    designer = get_designer()
    config = designer.config

    rows = []
    for r in range(config.rows):
        row_cells = []
        for c in range(config.cols):
            row_cells.append({
                'row': r,
                'col': c,
                'crop': designer.grid.get_cell(r, c),
                'is_path': is_path_cell(r, c),
            })
        rows.append(row_cells)

    return render_template(
        'designer.html',
        config=config,
        crops=list(designer.catalog),
        brush=designer.brush,
        rows=rows,
        col_markers=axis_markers(config.cols, config.cell_width),
        row_markers=axis_markers(config.rows, config.cell_length),
        advice=designer.advice(),
        summary=designer.summary(),
    )


@designer_bp.route('/api/designer/state')
def state():
    """Full designer state (JSON API)."""
    designer = get_designer()
    return jsonify({'success': True, **designer.to_dict()})


@designer_bp.route('/api/designer/config', methods=['POST'])
def configure():
    """Set land width/length and grid divisions.

    A single `divisions` value sets both rows and cols; `rows`/`cols` may
    also be given separately. Invalid numbers become 1; values above the
    configured limits are clamped.
    """
    data = json_object(request.get_json(silent=True))
    designer = get_designer()

    max_divisions = current_app.config['DESIGNER_MAX_DIVISIONS']
    max_land = current_app.config['DESIGNER_MAX_LAND_METERS']

    def divisions(key):
        return coerce_dimension(data[key], maximum=max_divisions) if key in data else None

    def meters(key):
        return coerce_dimension(data[key], maximum=max_land) if key in data else None

    rows = cols = divisions('divisions')
    if 'rows' in data:
        rows = divisions('rows')
    if 'cols' in data:
        cols = divisions('cols')

    land_width = meters('land_width')
    land_length = meters('land_length')

    pruned = designer.configure(rows=rows, cols=cols,
                                land_width=land_width, land_length=land_length)
    if pruned:
        current_app.logger.info("Resize pruned %d cells outside %dx%d",
                                pruned, designer.config.rows, designer.config.cols)

    return jsonify({
        'success': True,
        'config': designer.config.to_dict(),
        'pruned': pruned,
        **_derived(designer),
    })


@designer_bp.route('/api/designer/brush', methods=['POST'])
def brush():
    """Change the active brush.

    Actions:
    - toggle: add/remove crop_id from the multi-selection
    - select: make crop_id the single brush
    - erase:  clear both selections
    """
    data = json_object(request.get_json(silent=True))
    action = data.get('action', '')
    designer = get_designer()

    if action == 'erase':
        with designer.lock:
            designer.brush.erase()
            return jsonify({'success': True, 'brush': designer.brush.to_dict()})

    if action not in ('toggle', 'select'):
        return jsonify({'success': False, 'error': f"إجراء غير معروف: {action}"}), 400

    crop_id = data.get('crop_id')
    if designer.catalog.get(crop_id) is None:
        return jsonify({'success': False, 'error': 'المحصول غير موجود'}), 404

    with designer.lock:
        if action == 'toggle':
            designer.brush.toggle(crop_id)
        else:
            designer.brush.select_single(crop_id)
        return jsonify({'success': True, 'brush': designer.brush.to_dict()})


@designer_bp.route('/api/designer/tile', methods=['POST'])
def tile():
    """Paint (or erase) a single cell with the current brush."""
    data = json_object(request.get_json(silent=True))
    designer = get_designer()

    cell, error = parse_cell(data.get('row'), data.get('col'),
                             designer.config.rows, designer.config.cols)
    if error:
        return jsonify({'success': False, 'error': error}), 400

    crop = designer.paint(*cell)
    return jsonify({
        'success': True,
        'row': cell[0],
        'col': cell[1],
        'crop': crop.to_dict() if crop else None,
        **_derived(designer),
    })


@designer_bp.route('/api/designer/stroke', methods=['POST'])
def stroke():
    """Paint a click-drag gesture, cells applied in the order received."""
    data = json_object(request.get_json(silent=True))
    designer = get_designer()

    raw_cells = data.get('cells')
    if not isinstance(raw_cells, list):
        return jsonify({'success': False, 'error': "إحداثيات المربع غير صالحة"}), 400

    cells = []
    for item in raw_cells:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            return jsonify({'success': False, 'error': "إحداثيات المربع غير صالحة"}), 400
        cell, error = parse_cell(item[0], item[1], designer.config.rows, designer.config.cols)
        if error:
            return jsonify({'success': False, 'error': error}), 400
        cells.append(cell)

    designer.paint_stroke(cells)
    return jsonify({
        'success': True,
        'cells': designer.grid.to_list(),
        **_derived(designer),
    })


@designer_bp.route('/api/designer/smart-fill', methods=['POST'])
def smart_fill():
    """Fill empty non-path cells with the selected crops."""
    designer = get_designer()

    result, error = designer.smart_fill()
    if error:
        current_app.logger.warning("Smart fill rejected: no crop selected")
        return jsonify({
            'success': False,
            'level': 'error',
            'message': error,
            'error': error,
        }), 400

    current_app.logger.info("Smart fill planted %d cells from %d crops",
                            result.filled_count, result.palette_size)
    return jsonify({
        'success': True,
        'level': result.level,
        'message': result.message,
        'filled_count': result.filled_count,
        'cells': designer.grid.to_list(),
        **_derived(designer),
    })


@designer_bp.route('/api/designer/clear', methods=['POST'])
def clear():
    """Clear the whole grid once the user has confirmed."""
    data = json_object(request.get_json(silent=True))
    designer = get_designer()

    if data.get('confirm') is not True:
        return jsonify({
            'success': False,
            'error': "هل أنت متأكد من مسح المخطط بالكامل؟",
        }), 400

    designer.clear()
    current_app.logger.info("Planting grid cleared")
    return jsonify({'success': True, 'cells': [], **_derived(designer)})


@designer_bp.route('/api/designer/advice')
def advice():
    """Advisory lines and numeric summary (JSON API)."""
    designer = get_designer()
    return jsonify({'success': True, **_derived(designer)})
