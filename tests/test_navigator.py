from algotrace.engine import trace_anagram
from algotrace.markup import markup_to_text, neutral_markup, render_markup
from algotrace.navigator import TraceNavigator
from algotrace.types import Role

import pytest

def test_walk_forward_and_back():
    nav = TraceNavigator(trace_anagram("ab", "ba"))
    assert nav.at_start and nav.label() == "Step 1 of 5"
    assert nav.previous().index == 0
    nav.next(); nav.next()
    assert nav.current.action.value == "decrement"
    assert nav.goto(100).action.value == "success"
    assert nav.at_end and nav.label() == "Step 5 of 5"
    assert nav.next().index == 4
    assert nav.reset().index == 0

def test_single_step_trace():
    nav = TraceNavigator(trace_anagram("tax", "taxi"), index=3)
    assert nav.total == 1
    assert nav.at_start and nav.at_end

def test_markup_helpers():
    assert markup_to_text(render_markup("abc", 2, Role.COUNTING)) == "ab[c]"
    assert markup_to_text(render_markup("abc", 0, Role.MISMATCH), brackets="<>") == "<a>bc"
    assert all(m.role is Role.NEUTRAL for m in neutral_markup("xyz"))
    with pytest.raises(IndexError):
        render_markup("abc", 3, Role.MATCHING)

def test_navigator_over_rebuilt_api_payload():
    from algotrace.types import TraceResult
    direct = trace_anagram("cats", "tocs")
    nav = TraceNavigator(TraceResult.from_dict(direct.to_dict()))
    assert nav.goto(99) == direct.final_step
    assert nav.current.s2_markup[1].role is Role.MISMATCH
    assert nav.result.verdict is False and nav.label() == "Step 6 of 6"
