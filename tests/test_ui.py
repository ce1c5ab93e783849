from pathlib import Path

import pytest
import requests
from fastapi.testclient import TestClient
from streamlit.testing.v1 import AppTest
from api.main import app

UI_FILE = str(Path(__file__).resolve().parent.parent / "ui" / "app.py")

@pytest.fixture
def playground(monkeypatch):
    # Route the UI's HTTP calls into the API app in-process
    client = TestClient(app)
    monkeypatch.setenv("API_URL", "http://testserver")
    monkeypatch.setattr(requests, "get", client.get)
    monkeypatch.setattr(requests, "post", client.post)
    return AppTest.from_file(UI_FILE, default_timeout=30).run()

def test_step_buttons_track_current_position(playground):
    at = playground
    at.button(key="case_0").click().run()
    nav = at.session_state["nav"]
    assert nav.total == 15 and nav.index == 0
    assert at.button(key="prev_step").disabled
    assert not at.button(key="next_step").disabled

    at.button(key="next_step").click().run()
    assert at.session_state["nav"].index == 1
    assert not at.button(key="prev_step").disabled

    for _ in range(13):
        at.button(key="next_step").click().run()
    assert at.session_state["nav"].at_end
    assert at.button(key="next_step").disabled
    assert not at.button(key="prev_step").disabled

    at.button(key="prev_step").click().run()
    assert at.session_state["nav"].index == 13
    assert not at.button(key="next_step").disabled

def test_single_step_trace_disables_both_buttons(playground):
    at = playground
    at.button(key="case_5").click().run()
    assert at.session_state["nav"].total == 1
    assert at.button(key="prev_step").disabled and at.button(key="next_step").disabled
    assert any("NOT ANAGRAMS" in e.value for e in at.error)

def test_problem_panel_and_solution_source(playground):
    at = playground
    assert at.title[0].value == "DSA Playground: Anagrams"
    assert any("def anagrams(s1: str, s2: str)" in c.value for c in at.code)
    assert any("Time: O(n + m)" in m.value for m in at.markdown)
