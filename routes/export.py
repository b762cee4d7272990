"""
routes/export.py — Excel export route.

Provides:
- GET /export/excel — Download the current plan as an Excel workbook
"""

from flask import Blueprint, flash, redirect, url_for, send_file

from session_store import get_designer
from utils.export import generate_excel

export_bp = Blueprint('export', __name__, url_prefix='/export')


@export_bp.route('/excel')
def export_excel():
    """Export the session's planting grid as Excel."""
    designer = get_designer()

    buffer, filename = generate_excel(designer.grid, designer.config)
    if not buffer:
        flash("لا توجد مزروعات لتصديرها.", "warning")
        return redirect(url_for('designer.index'))

    return send_file(
        buffer,
        as_attachment=True,
        download_name=filename,
        mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
