"""
Settings layer for Amenu.
Uses SQLite to persist user preferences as key/value strings.
"""
import os
import sqlite3
import sys
from pathlib import Path

DEFAULTS = {
    'source_file':     'prompts',
    'theme':           'dark',
    'commit_delay_ms': '200',
    'font_size':       '14',
    'bar_height':      '36',
    'position_frames': '5',
    'auto_paste':      'false',
    'paste_hotkey':    'ctrl+v',
    'debug':           'false',
}

_TRUE = ('1', 'true', 'yes', 'on')


def default_db_path() -> Path:
    home = os.environ.get('AMENU_HOME')
    if home:
        app_dir = Path(home)
    else:
        app_dir = Path(os.environ.get('APPDATA', os.path.expanduser('~'))) / 'Amenu'
    return app_dir / 'amenu.db'


class Settings:
    def __init__(self, db_path=None):
        self.db_path = Path(db_path) if db_path else default_db_path()
        self._conn = None
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self.db_path))
            self._conn.row_factory = sqlite3.Row
            self._create_tables()
            self._init_default_settings()
        except (OSError, sqlite3.Error) as e:
            print(f'[Amenu] settings unavailable, using defaults: {e}', file=sys.stderr)
            if self._conn is not None:
                self._conn.close()
            self._conn = None

    def _create_tables(self):
        self._conn.executescript('''
            CREATE TABLE IF NOT EXISTS settings (
                key   TEXT PRIMARY KEY,
                value TEXT
            );
        ''')
        self._conn.commit()

    def _init_default_settings(self):
        cur = self._conn.cursor()
        for key, value in DEFAULTS.items():
            cur.execute('INSERT OR IGNORE INTO settings (key, value) VALUES (?, ?)', (key, value))
        self._conn.commit()

    # ── Accessors ─────────────────────────────────────────────────────────

    def get(self, key, default=None):
        if default is None:
            default = DEFAULTS.get(key)
        if self._conn is None:
            return default
        row = self._conn.execute('SELECT value FROM settings WHERE key=?', (key,)).fetchone()
        return row['value'] if row else default

    def set(self, key, value):
        if self._conn is None:
            print(f'[Amenu] cannot save setting "{key}": settings unavailable', file=sys.stderr)
            return
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        self._conn.execute('INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)', (key, str(value)))
        self._conn.commit()

    def get_int(self, key, default: int = 0) -> int:
        raw = self.get(key)
        try:
            return int(raw)
        except (TypeError, ValueError):
            print(f'[Amenu] invalid integer for "{key}": {raw!r}', file=sys.stderr)
            try:
                return int(DEFAULTS[key])
            except (KeyError, ValueError):
                return default

    def get_bool(self, key) -> bool:
        return str(self.get(key, 'false')).strip().lower() in _TRUE

    def items(self):
        """Effective settings: defaults overlaid with stored values."""
        merged = dict(DEFAULTS)
        if self._conn is not None:
            for row in self._conn.execute('SELECT key, value FROM settings ORDER BY key'):
                merged[row['key']] = row['value']
        return sorted(merged.items())

    def close(self):
        if self._conn is not None:
            self._conn.close()
            self._conn = None
