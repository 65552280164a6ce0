"""
Entry store for Amenu.

Entries come from a plain text file, one ``name:content`` pair per line.
The store is built once at startup and never changes afterwards.
"""
import os
import sys
from pathlib import Path
from types import MappingProxyType


class EntryStore:
    def __init__(self, entries=None):
        self._entries = dict(entries or {})
        self.entries = MappingProxyType(self._entries)
        self.all_names: tuple = tuple(self._entries)

    @classmethod
    def empty(cls) -> 'EntryStore':
        return cls()

    def content_for(self, name: str) -> str:
        return self._entries[name]

    def __contains__(self, name) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self):
        return f'EntryStore({len(self)} entries)'


def parse_entries(lines) -> dict:
    """Split each line on its first ':'; later duplicates win."""
    entries = {}
    for line in lines:
        name, sep, content = line.partition(':')
        if not sep:
            continue
        entries[name.strip()] = content.strip()
    return entries


def _debug(msg: str):
    print(f'[Amenu] DEBUG: {msg}', file=sys.stderr)


def load_entries(path, debug: bool = False) -> EntryStore:
    """
    Read the entry file at `path`.
    Never raises: an unreadable source yields an empty store.
    """
    path = Path(path)
    if debug:
        _debug(f'Current working dir: {os.getcwd()}')
        _debug(f'Attempting to open file: {str(path)!r}')

    try:
        # newline='' keeps \r and other separators inside values; only \n ends a line
        with path.open('r', encoding='utf-8', errors='replace', newline='') as fh:
            if debug:
                _debug('File opened successfully.')
            lines = [line[:-1] if line.endswith('\r') else line
                     for line in fh.read().split('\n')]
    except OSError as e:
        print(f'[Amenu] Could not open file: {e}', file=sys.stderr)
        lines = []

    if debug:
        for i, line in enumerate(lines[:3]):
            _debug(f'Reading line {i}: {line!r}')

    store = EntryStore(parse_entries(lines))
    if debug:
        _debug(f'Total loaded entries: {len(store)}')
    return store
