"""
app.py — Flask entry point for the farm designer.

Initializes the Flask app, attaches the in-memory designer session store,
registers all route blueprints, and injects i18n strings into template
context.

Run: python app.py → localhost:5000
"""

import os
import json
from flask import Flask
from flask_wtf.csrf import CSRFProtect

from session_store import init_session_store
from routes.designer import designer_bp
from routes.crops import crops_bp
from routes.export import export_bp


def create_app(test_config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.secret_key = os.environ.get('FARM_DESIGNER_SECRET_KEY', 'farm-designer-local-app-secret-key')
    app.config['WTF_CSRF_CHECK_DEFAULT'] = True
    app.config['TEMPLATES_AUTO_RELOAD'] = True

    # Designer defaults (10x10 grid over 100m x 100m) and per-request limits
    app.config['DESIGNER_DEFAULT_ROWS'] = 10
    app.config['DESIGNER_DEFAULT_COLS'] = 10
    app.config['DESIGNER_DEFAULT_WIDTH'] = 100
    app.config['DESIGNER_DEFAULT_LENGTH'] = 100
    app.config['DESIGNER_MAX_DIVISIONS'] = 100
    app.config['DESIGNER_MAX_LAND_METERS'] = 100000
    app.config['DESIGNER_MAX_SESSIONS'] = 1000

    if test_config:
        app.config.update(test_config)

    app.json.ensure_ascii = False

    csrf = CSRFProtect(app)

    init_session_store(app)

    # Register blueprints
    app.register_blueprint(designer_bp)
    app.register_blueprint(crops_bp)
    app.register_blueprint(export_bp)

    # Load i18n strings
    base_dir = os.path.dirname(os.path.abspath(__file__))
    i18n_path = os.path.join(base_dir, 'i18n', 'ar.json')
    try:
        with open(i18n_path, 'r', encoding='utf-8') as f:
            i18n = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Warning: Could not load UI strings from {i18n_path}: {e}")
        i18n = {}

    @app.context_processor
    def inject_i18n():
        """Inject Arabic UI strings into all templates."""
        return {'i18n': i18n}

    return app


if __name__ == '__main__':
    app = create_app()
    # Debug mode: enabled by default for development (auto-reload on file changes)
    # Set FLASK_DEBUG=0 to disable for production
    debug = os.environ.get('FLASK_DEBUG', '1') != '0'
    app.run(host='localhost', port=5000, debug=debug)
