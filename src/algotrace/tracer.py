# -----------------------------------------------------------------------------
# Tracing utility
# Purpose:
#   Lightweight, append-only collector of TraceSteps recorded during a single
#   engine run. Assigns step indices in order of occurrence and hands the
#   finished sequence back as one immutable tuple.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import List, Mapping, Optional, Tuple

from .types import Action, Markup, TraceStep


class Tracer:
    def __init__(self): self._steps: List[TraceStep] = []

    def add(self, action: Action, description: str, details: str, count: Mapping[str, int],
            s1_markup: Markup, s2_markup: Markup, char: Optional[str] = None,
            position: Optional[int] = None, result: Optional[bool] = None) -> TraceStep:
        step = TraceStep(index=len(self._steps), action=action, description=description,
                         details=details, count=count, s1_markup=s1_markup, s2_markup=s2_markup,
                         char=char, position=position, result=result)
        self._steps.append(step)
        return step

    def steps(self) -> Tuple[TraceStep, ...]: return tuple(self._steps)

    @property
    def last(self) -> Optional[TraceStep]:
        return self._steps[-1] if self._steps else None

    def __len__(self) -> int: return len(self._steps)
