"""
Highlight position within the current candidate list.
"""


class SelectionCursor:
    def __init__(self, candidates=()):
        self.candidates: tuple = tuple(candidates)
        self.index = 0

    def reset(self, candidates=None):
        if candidates is not None:
            self.candidates = tuple(candidates)
        self.index = 0

    def advance(self):
        # Forward only; wraps at the end
        if not self.candidates:
            return
        self.index = (self.index + 1) % len(self.candidates)

    def current(self):
        if not self.candidates:
            return None
        return self.candidates[self.index]

    def is_selected(self, position: int) -> bool:
        return bool(self.candidates) and position == self.index
