# -----------------------------------------------------------------------------
# Types module: Shared records for the trace engine
# Purpose:
#   Define the step/result records emitted by the engine and read by every
#   consumer (API, UI, navigator, catalogue runner). All records are frozen;
#   a finished trace is read-only.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


class Action(str, Enum):
    """Closed set of step kinds. Consumers branch presentation on these."""
    LENGTH_MISMATCH = "length_mismatch"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    NOT_FOUND = "not_found"
    SUCCESS = "success"
    NON_ZERO = "non_zero"


class Role(str, Enum):
    NEUTRAL = "neutral"
    COUNTING = "counting"    # s1 character being added to the table
    MATCHING = "matching"    # s2 character matched against the table
    MISMATCH = "mismatch"    # s2 character with nothing left to match


# Terminal actions carry the verdict
TERMINAL_ACTIONS = frozenset({Action.LENGTH_MISMATCH, Action.NOT_FOUND, Action.SUCCESS, Action.NON_ZERO})


@dataclass(frozen=True)
class CharMark:
    # One character position with its highlight role.
    char: str
    role: Role = Role.NEUTRAL

    def to_dict(self) -> Dict[str, str]:
        return {"char": self.char, "role": self.role.value}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "CharMark":
        return CharMark(char=d["char"], role=Role(d["role"]))


Markup = Tuple[CharMark, ...]


@dataclass(frozen=True)
class TraceStep:
    """
    One observable moment of a trace run.
    - index: 0-based position in the step sequence
    - count: read-only snapshot of the count table at this point
    - s1_markup / s2_markup: one CharMark per character of each input
    - char / position: the character under consideration and where it sits
      in the string being read (None on verdict-only steps)
    - result: verdict, set only on terminal steps
    """
    index: int
    action: Action
    description: str
    details: str
    count: Mapping[str, int]
    s1_markup: Markup
    s2_markup: Markup
    char: Optional[str] = None
    position: Optional[int] = None
    result: Optional[bool] = None

    @property
    def is_terminal(self) -> bool:
        return self.action in TERMINAL_ACTIONS

    def to_dict(self) -> Dict[str, Any]:
        # Export in plain dict form for easy JSON serialization.
        return {
            "index": self.index,
            "action": self.action.value,
            "description": self.description,
            "details": self.details,
            "count": dict(self.count),
            "s1_markup": [m.to_dict() for m in self.s1_markup],
            "s2_markup": [m.to_dict() for m in self.s2_markup],
            "char": self.char,
            "position": self.position,
            "result": self.result,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TraceStep":
        """Rebuild a step from its to_dict() form (e.g. an API response)."""
        return TraceStep(
            index=int(d["index"]),
            action=Action(d["action"]),
            description=d["description"],
            details=d["details"],
            count=MappingProxyType(dict(d["count"])),
            s1_markup=tuple(CharMark.from_dict(m) for m in d["s1_markup"]),
            s2_markup=tuple(CharMark.from_dict(m) for m in d["s2_markup"]),
            char=d.get("char"),
            position=d.get("position"),
            result=d.get("result"),
        )


@dataclass(frozen=True)
class TraceResult:
    s1: str
    s2: str
    steps: Tuple[TraceStep, ...]
    verdict: bool
    elapsed_ms: float

    @property
    def final_step(self) -> TraceStep:
        return self.steps[-1]

    def actions(self) -> List[Action]:
        return [s.action for s in self.steps]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "s1": self.s1,
            "s2": self.s2,
            "verdict": self.verdict,
            "elapsed_ms": self.elapsed_ms,
            "steps": [s.to_dict() for s in self.steps],
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TraceResult":
        return TraceResult(
            s1=d["s1"], s2=d["s2"],
            steps=tuple(TraceStep.from_dict(s) for s in d["steps"]),
            verdict=bool(d["verdict"]),
            elapsed_ms=float(d["elapsed_ms"]),
        )
