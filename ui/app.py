# -----------------------------------------------------------------------------
# Streamlit Frontend for the Anagram Trace Playground
# Purpose:
#   Minimal UI to (1) read the problem and its reference solution, (2) enter
#   two strings or pick a canned case, (3) call the trace API, and (4) replay
#   the recorded steps forward/backward.
#   The trace is fetched once per run; stepping only moves the navigator.
#---------------------------------------------------------------------------

import os, json, html, requests, streamlit as st
from dotenv import load_dotenv
from algotrace.markup import markup_to_text
from algotrace.navigator import TraceNavigator
from algotrace.types import TraceResult

# Load .env to pick API_URL at runtime for local/remote backends
load_dotenv()
API_URL = os.getenv("API_URL","http://127.0.0.1:8000")

ROLE_STYLE = {
    "counting": "background:#dbeafe;color:#1e40af;",
    "matching": "background:#d1fae5;color:#065f46;",
    "mismatch": "background:#fee2e2;color:#991b1b;",
}
ACTION_COLOR = {"success": "green", "not_found": "red", "non_zero": "red", "length_mismatch": "red"}

def render_markup(markup):
    # Escape every character; the API only sends role tags, never HTML.
    spans = []
    for m in markup:
        style = ROLE_STYLE.get(m.role.value)
        ch = html.escape(m.char) if m.char != " " else "&nbsp;"
        spans.append(f'<span style="{style}padding:0 3px;border-radius:3px">{ch}</span>' if style else ch)
    return f'<div style="font-family:monospace;font-size:1.3rem;letter-spacing:2px">{"".join(spans) or "&nbsp;"}</div>'

def run_trace(s1, s2):
    r = requests.post(f"{API_URL}/trace", json={"s1": s1, "s2": s2})
    if r.status_code != 200:
        st.error(f"Trace error: {r.text}")
        return
    st.session_state.nav = TraceNavigator(TraceResult.from_dict(r.json()))

def step_by(delta):
    # Runs before the rerun, so the buttons below render with the new position.
    nav = st.session_state.nav
    nav.goto(nav.index + delta)

# Page setup and header
st.set_page_config(page_title="Anagram Trace Playground", layout="centered")
st.title("DSA Playground: Anagrams")
st.session_state.setdefault("s1", "restful")
st.session_state.setdefault("s2", "fluster")
st.session_state.setdefault("nav", None)

# ---------------- Problem statement + solution --------------------------------
r = requests.get(f"{API_URL}/problem")
if r.status_code == 200:
    prob = r.json()
    st.subheader(prob["title"])
    st.write(prob["statement"])
    t, s, d = st.columns(3)
    t.markdown(f':green[Time: {prob["time"]}]')
    s.markdown(f':violet[Space: {prob["space"]}]')
    d.markdown(f':orange[Difficulty: {prob["difficulty"]}]')
    with st.expander("Show Solution"):
        st.code(prob["solution"], language="python")
        st.markdown("**Algorithm Steps**")
        st.markdown("\n".join(f"{i}. {x}" for i, x in enumerate(prob["steps"], 1)))
        notes = prob["complexity_notes"]
        st.markdown("**Complexity Analysis**")
        st.markdown(f'- Time: {prob["time"]} ({notes["time"]})\n- Space: {prob["space"]} ({notes["space"]})')
        st.caption(notes["legend"])
        st.markdown("**Key Insights**")
        st.markdown("\n".join(f"- {x}" for x in prob["insights"]))
else:
    st.error(f"Problem error: {r.text}")

# ---------------- Sidebar: Canned test cases ----------------------------------
with st.sidebar:
    st.subheader("Test Cases")
    r = requests.get(f"{API_URL}/catalog")
    if r.status_code == 200:
        for it in r.json()["items"]:
            mark = "✓" if it["expected"] else "✗"
            if st.button(f'"{it["s1"]}" ↔ "{it["s2"]}"  {mark}', key=f"case_{it['index']}"):
                st.session_state.s1, st.session_state.s2 = it["s1"], it["s2"]
                run_trace(it["s1"], it["s2"])
    else:
        st.error(f"Catalog error: {r.text}")

# ---------------- Main Form: inputs + run -------------------------------------
with st.form("playground"):
    c1, c2 = st.columns(2)
    s1 = c1.text_input("First String", key="s1")
    s2 = c2.text_input("Second String", key="s2")
    b1, b2 = st.columns([4, 1])
    submit = b1.form_submit_button("Run Algorithm")
    reset = b2.form_submit_button("Reset")

if reset:
    st.session_state.nav = None
elif submit:
    if not s1.strip() or not s2.strip():
        st.warning("Please enter both strings.")
    else:
        run_trace(s1.strip(), s2.strip())

nav = st.session_state.nav
if nav:
    res = nav.result
    # ---------------- Verdict banner ------------------------------------------
    if res.verdict:
        st.success(f'✓ ANAGRAMS: "{res.s1}" and "{res.s2}" contain the same characters')
    else:
        st.error(f'✗ NOT ANAGRAMS: "{res.s1}" and "{res.s2}" have different character compositions')
    st.caption(f"Execution Time: {res.elapsed_ms:.3f} ms")

    # ---------------- Step viewer ---------------------------------------------
    st.subheader("Step-by-Step Visualization")
    prev_col, label_col, next_col = st.columns([1, 3, 1])
    prev_col.button("◀", key="prev_step", on_click=step_by, args=(-1,), disabled=nav.at_start)
    next_col.button("▶", key="next_step", on_click=step_by, args=(1,), disabled=nav.at_end)
    label_col.markdown(nav.label())
    step = nav.current

    color = ACTION_COLOR.get(step.action.value, "blue")
    st.markdown(f":{color}[**{step.description}**]")
    st.caption(step.details)

    st.markdown("**Character Count Object**")
    st.code(json.dumps(dict(step.count), indent=2) if step.count else "// Empty count object", language="json")

    plain = st.checkbox("Plain-text view", key="plain_view")
    left, right = st.columns(2)
    for col, title, markup in ((left, "String 1 Processing", step.s1_markup),
                               (right, "String 2 Processing", step.s2_markup)):
        with col:
            st.markdown(f"**{title}**")
            if plain:
                st.code(markup_to_text(markup) or " ", language=None)
            else:
                st.markdown(render_markup(markup), unsafe_allow_html=True)
