"""
Clipboard sink for Amenu.
Writes text through pyperclip; Amenu itself never reads the clipboard.
"""
import subprocess
import sys

import pyperclip


class ClipboardError(Exception):
    """A clipboard write did not go through."""


class PyperclipSink:
    def __init__(self, copy_fn):
        self._copy = copy_fn

    def set_text(self, content: str):
        # Subprocess backends (xclip, wl-copy) fail with OS or process errors
        try:
            self._copy(content)
        except (pyperclip.PyperclipException, OSError, subprocess.SubprocessError) as e:
            raise ClipboardError(str(e)) from e


def open_clipboard():
    """
    Pick a clipboard backend once at startup.
    Returns None when the platform has no usable mechanism.
    """
    try:
        copy_fn, _paste_fn = pyperclip.determine_clipboard()
    except pyperclip.PyperclipException as e:
        print(f'[Amenu] Clipboard interface unavailable: {e}', file=sys.stderr)
        return None
    # pyperclip hands back a falsy stub when no mechanism was found
    if not copy_fn:
        print('[Amenu] Clipboard interface unavailable.', file=sys.stderr)
        return None
    return PyperclipSink(copy_fn)


def send_paste(hotkey: str = 'ctrl+v') -> bool:
    """Send the paste chord to whichever window has focus."""
    try:
        import keyboard
        keyboard.send(hotkey)
        return True
    except Exception as e:
        print(f'[Amenu] Failed to send paste hotkey "{hotkey}": {e}', file=sys.stderr)
        return False
