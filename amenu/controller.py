"""
Interaction controller — routes one tick of input events through the
selection engine and produces the render model for the bar.

Order inside a tick is fixed: cancel, cycle, commit, text change.
A cancel or commit in the same tick as an edit therefore wins.
"""
import enum
import time
from dataclasses import dataclass
from typing import Optional

from .commit import COMMIT_DELAY, Termination, cancel, commit
from .cursor import SelectionCursor
from .search import filter_names


class ControllerState(enum.Enum):
    IDLE = 'idle'
    TERMINATING = 'terminating'


@dataclass(frozen=True)
class InputBatch:
    cancel: bool = False
    cycle: bool = False
    commit: bool = False
    text: Optional[str] = None   # full new query; None when unchanged


@dataclass(frozen=True)
class RenderModel:
    query: str
    items: tuple   # ((name, is_highlighted), ...)


class PickerController:
    def __init__(self, store, sink, commit_delay: float = COMMIT_DELAY, sleep=time.sleep):
        self.store = store
        self.sink = sink
        self.commit_delay = commit_delay
        self._sleep = sleep

        self.state = ControllerState.IDLE
        self.query = ''
        self.cursor = SelectionCursor()
        self.termination: Optional[Termination] = None

    @property
    def terminating(self) -> bool:
        return self.state is ControllerState.TERMINATING

    @property
    def candidates(self) -> tuple:
        return self.cursor.candidates

    # ── Event routing ─────────────────────────────────────────────────────

    def process(self, events: InputBatch) -> Optional[RenderModel]:
        if self.terminating:
            return None

        if events.cancel:
            self._terminate(cancel())
        if events.cycle and not self.terminating:
            self.cursor.advance()
        if events.commit and not self.terminating:
            self._terminate(commit(self.store, self.cursor, self.sink,
                                   delay=self.commit_delay, sleep=self._sleep))
        if events.text is not None and not self.terminating:
            self.query = events.text
            self.cursor.reset(filter_names(self.store.all_names, self.query))

        if self.terminating:
            return None
        return self.render_model()

    def change_query(self, text: str):
        return self.process(InputBatch(text=text))

    def cycle(self):
        return self.process(InputBatch(cycle=True))

    def submit(self):
        return self.process(InputBatch(commit=True))

    def dismiss(self):
        return self.process(InputBatch(cancel=True))

    # ── Render model ──────────────────────────────────────────────────────

    def render_model(self) -> RenderModel:
        items = tuple(
            (name, self.cursor.is_selected(i))
            for i, name in enumerate(self.cursor.candidates)
        )
        return RenderModel(self.query, items)

    def _terminate(self, termination: Termination):
        self.termination = termination
        self.state = ControllerState.TERMINATING
