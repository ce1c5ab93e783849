# -----------------------------------------------------------------------------
# Trace navigator
# Purpose:
#   Forward/back cursor over a finished TraceResult for replay consumers.
#   Pure read access: moving the cursor never re-runs the engine.
# -----------------------------------------------------------------------------

from __future__ import annotations

from .types import TraceResult, TraceStep


class TraceNavigator:
    def __init__(self, result: TraceResult, index: int = 0):
        self.result = result
        self._index = 0
        self.goto(index)

    @property
    def index(self) -> int: return self._index

    @property
    def total(self) -> int: return len(self.result.steps)

    @property
    def current(self) -> TraceStep: return self.result.steps[self._index]

    @property
    def at_start(self) -> bool: return self._index == 0

    @property
    def at_end(self) -> bool: return self._index == self.total - 1

    def goto(self, index: int) -> TraceStep:
        # Clamp into [0, total-1]
        self._index = max(0, min(index, self.total - 1))
        return self.current

    def next(self) -> TraceStep: return self.goto(self._index + 1)

    def previous(self) -> TraceStep: return self.goto(self._index - 1)

    def reset(self) -> TraceStep: return self.goto(0)

    def label(self) -> str:
        return f"Step {self._index + 1} of {self.total}"
