# --- Anagram Trace Playground API (FastAPI) -----------------------------------
# Purpose: Minimal API that (1) runs the anagram trace engine on two strings and
# returns the full recorded trace, and (2) serves the canned test-case catalogue.
# ------------------------------------------------------------------------------

from __future__ import annotations
import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from algotrace.catalog import CaseCatalog, CatalogError
from algotrace.engine import AnagramTraceEngine
from algotrace.logging_config import configure_from_env
from algotrace.problem import problem_payload

# Load .env for external configuration (catalogue path, logging)
load_dotenv()
PROJECT_ROOT = Path(__file__).resolve().parent.parent
CATALOG_PATH = os.getenv("CATALOG_PATH", str(PROJECT_ROOT / "examples" / "anagram_cases.yaml"))
# Each step carries markup for both strings, so payloads grow with length squared
TRACE_MAX_LENGTH = int(os.getenv("TRACE_MAX_LENGTH", "200"))

configure_from_env()
logger = logging.getLogger("algotrace.api")

app = FastAPI(title="Anagram Trace Playground API")

# Catalogue loaded once; the engine keeps no per-run state so one instance serves all requests
_catalog = CaseCatalog.from_file(CATALOG_PATH)
_engine = AnagramTraceEngine()
logger.info("Loaded %d canned cases from %s", len(_catalog.cases), CATALOG_PATH)

# ----------------------------- Schemas ----------------------------------------
class TraceRequest(BaseModel):
    # Compared as given: case-sensitive, no trimming.
    s1: str = Field(max_length=TRACE_MAX_LENGTH)
    s2: str = Field(max_length=TRACE_MAX_LENGTH)

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.get("/catalog")
def list_catalog():
    """List canned cases (index, name, s1, s2, expected) for the test-case panel."""
    return {"count": len(_catalog.cases), "items": _catalog.list_cases()}

@app.get("/problem")
def problem():
    """Problem statement, complexity, walkthrough and the reference solution source."""
    return problem_payload()

@app.post("/trace")
def trace(req: TraceRequest):
    """
    Run the engine once and return the whole trace:
    steps (with count snapshots and per-character role markup), verdict, elapsed_ms.
    """
    return _engine.run(req.s1, req.s2).to_dict()

@app.post("/catalog/run")
def run_catalog():
    """Replay every canned case and report expected vs. actual verdicts."""
    outcomes = _catalog.run(_engine)
    return {
        "count": len(outcomes),
        "all_passed": all(o.passed for o in outcomes),
        "items": [o.to_dict() for o in outcomes],
    }

@app.get("/catalog/{index}/trace")
def trace_case(index: int):
    """Trace a single canned case by its catalogue index."""
    try:
        case = _catalog.get(index)
    except CatalogError as e:
        raise HTTPException(status_code=404, detail=str(e))
    payload = _engine.run(case.s1, case.s2).to_dict()
    payload["expected"] = case.expected
    payload["name"] = case.name
    return payload
