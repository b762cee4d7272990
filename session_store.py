"""
session_store.py — In-memory designer sessions.

Each browser session owns one DesignerSession (catalog, brush, grid
configuration and planting grid). Nothing is written to disk: sessions live
in the process for as long as it runs.

The Flask session cookie only carries the session id; the store itself is
kept in app.extensions['designer_sessions'].
"""

import threading
import uuid
from collections import OrderedDict

from flask import current_app, session

from advisory_engine import generate_advice, summarize_grid
from allocation_engine import smart_fill
from crop_catalog import CropCatalog
from grid_model import PlantingGrid, resolve_tile_action
from models import Brush, GridConfig

SESSION_KEY = 'designer_id'


class DesignerSession:
    """State of one farm designer session.

    Every mutation and derived read holds `lock`, so requests for the same
    session are applied one at a time.
    """

    def __init__(self, config=None, catalog=None):
        self.config = config or GridConfig()
        self.catalog = catalog or CropCatalog()
        self.brush = Brush()
        self.grid = PlantingGrid()
        self.lock = threading.RLock()

    # ---------------------------------------
    # Configuration
    # ---------------------------------------

    def configure(self, rows=None, cols=None, land_width=None, land_length=None):
        """Update grid resolution and land dimensions (already coerced).

        Cells outside a shrunken grid are pruned.

        Returns:
            Number of pruned cells.
        """
        with self.lock:
            if rows is not None:
                self.config.rows = rows
            if cols is not None:
                self.config.cols = cols
            if land_width is not None:
                self.config.land_width = land_width
            if land_length is not None:
                self.config.land_length = land_length
            return self.grid.prune(self.config.rows, self.config.cols)

    # ---------------------------------------
    # Painting
    # ---------------------------------------

    def paint(self, row, col):
        """Resolve one tile action with the current brush."""
        with self.lock:
            return resolve_tile_action(
                self.grid, row, col, self.config.cols,
                palette=self.brush.multi_palette(self.catalog),
                single=self.brush.single_crop(self.catalog),
            )

    def paint_stroke(self, cells):
        """Apply a drag gesture: each cell in order, last write wins."""
        with self.lock:
            palette = self.brush.multi_palette(self.catalog)
            single = self.brush.single_crop(self.catalog)
            for row, col in cells:
                resolve_tile_action(self.grid, row, col, self.config.cols,
                                    palette=palette, single=single)

    def smart_fill(self):
        """
        Run smart fill with the current palette.

        Returns:
            (FillResult, None) on success, or (None, error_message). The grid
            is only replaced on success.
        """
        with self.lock:
            result, error = smart_fill(
                self.grid, self.config.rows, self.config.cols,
                self.brush.palette(self.catalog),
            )
            if error:
                return None, error
            self.grid = result.grid
            return result, None

    def clear(self):
        with self.lock:
            self.grid.clear()

    # ---------------------------------------
    # Derived views
    # ---------------------------------------

    def advice(self):
        with self.lock:
            return generate_advice(self.grid, self.config)

    def summary(self):
        with self.lock:
            return summarize_grid(self.grid, self.config)

    def to_dict(self):
        with self.lock:
            return {
                'config': self.config.to_dict(),
                'brush': self.brush.to_dict(),
                'crops': self.catalog.to_list(),
                'cells': self.grid.to_list(),
                'advice': self.advice(),
                'summary': self.summary(),
            }


class SessionStore:
    """Thread-safe map of session id → DesignerSession.

    Holds at most `max_sessions`; the least recently used session is
    discarded to make room for a new one.
    """

    def __init__(self, config_factory=None, max_sessions=1000):
        self._sessions = OrderedDict()
        self._lock = threading.Lock()
        self._config_factory = config_factory or GridConfig
        self.max_sessions = max_sessions

    def get_or_create(self, session_id):
        with self._lock:
            designer = self._sessions.get(session_id)
            if designer is not None:
                self._sessions.move_to_end(session_id)
                return designer

            while self._sessions and len(self._sessions) >= self.max_sessions:
                self._sessions.popitem(last=False)

            designer = DesignerSession(config=self._config_factory())
            self._sessions[session_id] = designer
            return designer

    def __contains__(self, session_id):
        return session_id in self._sessions

    def __len__(self):
        return len(self._sessions)


def init_session_store(app):
    """Attach a SessionStore configured from the app's designer defaults."""
    def config_factory():
        return GridConfig(
            rows=app.config['DESIGNER_DEFAULT_ROWS'],
            cols=app.config['DESIGNER_DEFAULT_COLS'],
            land_width=app.config['DESIGNER_DEFAULT_WIDTH'],
            land_length=app.config['DESIGNER_DEFAULT_LENGTH'],
        )

    store = SessionStore(config_factory, max_sessions=app.config['DESIGNER_MAX_SESSIONS'])
    app.extensions['designer_sessions'] = store
    return store


def get_designer():
    """Return the DesignerSession bound to the current browser session."""
    session_id = session.get(SESSION_KEY)
    if not session_id:
        session_id = uuid.uuid4().hex
        session[SESSION_KEY] = session_id
    return current_app.extensions['designer_sessions'].get_or_create(session_id)
