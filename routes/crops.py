"""
routes/crops.py — Seed box (crop catalog) API routes.

Provides:
- GET  /api/crops/ — List crops available to the designer
- POST /api/crops/ — Add a custom crop {name, icon, color}
"""

from flask import Blueprint, request, jsonify, current_app

from session_store import get_designer
from utils.validators import json_object, normalize_color

crops_bp = Blueprint('crops', __name__, url_prefix='/api/crops')


@crops_bp.route('/')
def list_crops():
    """Get all crops in the session's seed box (JSON API)."""
    designer = get_designer()
    return jsonify({'success': True, 'crops': designer.catalog.to_list()})


@crops_bp.route('/', methods=['POST'])
def add_crop():
    """Add a user-defined crop to the seed box."""
    data = json_object(request.get_json(silent=True))
    designer = get_designer()

    with designer.lock:
        crop, error = designer.catalog.add_custom_crop(
            data.get('name', ''),
            icon=data.get('icon', ''),
            color=normalize_color(data.get('color')),
        )
    if error:
        return jsonify({'success': False, 'error': error}), 400

    current_app.logger.info("Custom crop added: %s (%s)", crop.name, crop.id)
    return jsonify({
        'success': True,
        'message': "تمت إضافة المحصول الجديد لصندوق البذور",
        'crop': crop.to_dict(),
    }), 201
