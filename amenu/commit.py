"""
Commit protocol: resolve the highlight, write the clipboard, terminate.
"""
import sys
import time
from dataclasses import dataclass
from typing import Optional

from .clipboard import ClipboardError

COMMIT_DELAY = 0.2  # seconds; lets the clipboard consumer read before we exit


@dataclass(frozen=True)
class Termination:
    reason: str                    # 'commit' | 'cancel'
    copied: Optional[str] = None   # content written to the clipboard, if any


def commit(store, cursor, sink, delay: float = COMMIT_DELAY, sleep=time.sleep) -> Termination:
    name = cursor.current()
    if name is None:
        return Termination('commit')

    content = store.content_for(name)
    if sink is None:
        print('[Amenu] Clipboard interface unavailable.', file=sys.stderr)
        return Termination('commit')

    copied = None
    try:
        sink.set_text(content)
        copied = content
    except (ClipboardError, OSError) as e:
        print(f'[Amenu] Failed to copy to clipboard: {e}', file=sys.stderr)

    # Some backends drop the selection when the owning process exits
    if delay > 0:
        sleep(delay)
    return Termination('commit', copied=copied)


def cancel() -> Termination:
    return Termination('cancel')
