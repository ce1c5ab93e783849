# -----------------------------------------------------------------------------
# AnagramTraceEngine: character-count anagram check with a recorded trace
# Responsibilities:
#   • Length short-circuit (unequal lengths can never be anagrams)
#   • Phase 1: build the count table from s1, one step per character
#   • Phase 2: deplete the table with s2, failing fast on the first character
#     that has nothing left to match
#   • Final verdict step (empty table → success, leftovers → non_zero)
#   • Per-step highlight markup and table snapshots for replay
# A run is synchronous and self-contained: fresh table, fresh tracer, no state
# carried between calls.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
import time
from typing import Callable

from .counts import CharCountTable
from .markup import neutral_markup, render_markup
from .tracer import Tracer
from .types import Action, Role, TraceResult

logger = logging.getLogger(__name__)


class AnagramTraceEngine:
    def __init__(self, table_factory: Callable[[], CharCountTable] = CharCountTable):
        # Table class is injectable so consistency checks can be exercised.
        self.table_factory = table_factory

    # ---------------- phases ----------------

    def _length_mismatch(self, s1: str, s2: str, trace: Tracer) -> bool:
        trace.add(
            Action.LENGTH_MISMATCH,
            description=f"Lengths differ ({len(s1)} vs {len(s2)})",
            details="Anagrams must have the same length - NOT ANAGRAMS",
            count=self.table_factory().snapshot(),
            s1_markup=neutral_markup(s1),
            s2_markup=neutral_markup(s2),
            result=False,
        )
        return False

    def _count_first(self, s1: str, s2: str, table: CharCountTable, trace: Tracer) -> None:
        s2_idle = neutral_markup(s2)
        for i, c in enumerate(s1):
            n = table.increment(c)
            trace.add(
                Action.INCREMENT,
                description=f"Processing character '{c}' from first string",
                details=f"Count for '{c}' is now {n}",
                count=table.snapshot(),
                s1_markup=render_markup(s1, i, Role.COUNTING),
                s2_markup=s2_idle,
                char=c,
                position=i,
            )

    def _consume_second(self, s1: str, s2: str, table: CharCountTable, trace: Tracer) -> bool:
        """
        Walk s2 against the table. Returns False at the first character with no
        remaining count (after recording a not_found step), True if every
        character was matched.
        """
        s1_idle = neutral_markup(s1)
        for i, c in enumerate(s2):
            if not table.decrement(c):
                trace.add(
                    Action.NOT_FOUND,
                    description=f"Character '{c}' not found in count",
                    details=f"No '{c}' left to match from the first string - NOT ANAGRAMS",
                    count=table.snapshot(),
                    s1_markup=s1_idle,
                    s2_markup=render_markup(s2, i, Role.MISMATCH),
                    char=c,
                    position=i,
                    result=False,
                )
                return False
            left = table.count(c)
            trace.add(
                Action.DECREMENT,
                description=f"Character '{c}' found, decrementing count",
                details=(f"Count for '{c}' is now {left}" if left
                         else f"Count for '{c}' reached 0 and was removed"),
                count=table.snapshot(),
                s1_markup=s1_idle,
                s2_markup=render_markup(s2, i, Role.MATCHING),
                char=c,
                position=i,
            )
        return True

    def _final_check(self, s1: str, s2: str, table: CharCountTable, trace: Tracer) -> bool:
        if table.is_empty():
            trace.add(
                Action.SUCCESS,
                description="All character counts are zero",
                details="Every character of the first string was matched exactly once - ANAGRAMS!",
                count=table.snapshot(),
                s1_markup=neutral_markup(s1),
                s2_markup=neutral_markup(s2),
                result=True,
            )
            return True

        # Unreachable after the length check unless the table misbehaves.
        c, n = next(iter(table.items()))
        logger.warning("Count table not empty after equal-length inputs %r/%r: %r", s1, s2, table)
        trace.add(
            Action.NON_ZERO,
            description=f"Character '{c}' has remaining count {n}",
            details="Not all counts are zero - NOT ANAGRAMS",
            count=table.snapshot(),
            s1_markup=neutral_markup(s1),
            s2_markup=neutral_markup(s2),
            char=c,
            result=False,
        )
        return False

    # ---------------- public API ----------------

    def run(self, s1: str, s2: str) -> TraceResult:
        """
        Execute the full algorithm once and return every recorded step,
        the verdict, and the wall-clock time of the run in milliseconds.
        """
        start = time.perf_counter()
        trace = Tracer()

        if len(s1) != len(s2):
            verdict = self._length_mismatch(s1, s2, trace)
        else:
            table = self.table_factory()
            self._count_first(s1, s2, table, trace)
            verdict = (self._consume_second(s1, s2, table, trace)
                       and self._final_check(s1, s2, table, trace))

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug("run(%r, %r) -> %s in %d steps (%.3f ms)", s1, s2, verdict, len(trace), elapsed_ms)
        return TraceResult(s1=s1, s2=s2, steps=trace.steps(), verdict=verdict, elapsed_ms=elapsed_ms)


def trace_anagram(s1: str, s2: str) -> TraceResult:
    return AnagramTraceEngine().run(s1, s2)
