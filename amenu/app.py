"""
Main application controller for Amenu.
Coordinates settings, the entry store, the clipboard and the picker bar.
"""
import sys
import time

from .clipboard import open_clipboard, send_paste
from .controller import PickerController
from .entries import load_entries
from .settings import Settings


PASTE_DELAY = 0.08  # seconds; let focus return to the previous window


class AmenuApp:
    def __init__(self, source=None, settings=None, debug: bool = False, clipboard_factory=open_clipboard):
        self.settings = settings or Settings()
        self.debug = debug or self.settings.get_bool('debug')
        self.source = source or self.settings.get('source_file')

        self.store = load_entries(self.source, debug=self.debug)
        # Held for the whole process lifetime
        self.clipboard = clipboard_factory()
        self.controller = PickerController(
            self.store, self.clipboard,
            commit_delay=self.settings.get_int('commit_delay_ms') / 1000,
        )
        self.termination = None
        self.root = None

    # ── Lifecycle ──────────────────────────────────────────────────────────

    def run(self):
        import tkinter as tk
        from .ui.bar import PickerBar

        self.root = tk.Tk()
        self.root.withdraw()
        PickerBar(
            self.root, self.controller, self._on_exit,
            theme=self.settings.get('theme'),
            font_size=self.settings.get_int('font_size'),
            bar_height=self.settings.get_int('bar_height'),
            position_frames=self.settings.get_int('position_frames'),
        )
        self.root.mainloop()
        self.settings.close()
        return self.termination

    def quit(self):
        if self.root is None:
            return
        try:
            self.root.quit()
            self.root.destroy()
        except Exception:
            pass
        self.root = None

    # ── Exit path ─────────────────────────────────────────────────────────

    def _on_exit(self, termination):
        self.termination = termination
        if self.debug:
            print(f'[Amenu] DEBUG: terminating ({termination.reason})', file=sys.stderr)
        self.quit()
        if termination.copied is not None and self.settings.get_bool('auto_paste'):
            time.sleep(PASTE_DELAY)
            send_paste(self.settings.get('paste_hotkey'))
