# -----------------------------------------------------------------------------
# dev_up.py: Dev launcher for the Anagram Trace Playground
# Checks the canned-case catalogue, starts the trace API under uvicorn, waits
# for /health, then starts the Streamlit playground pointed at that API.
# Both children get the project root and src/ on PYTHONPATH, so a plain
# checkout runs without `pip install -e .`.
# -----------------------------------------------------------------------------

from __future__ import annotations
import os
import sys
import time
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import requests
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.resolve()
SRC_DIR = PROJECT_ROOT / "src"
API_APP = "api.main:app"
UI_FILE = PROJECT_ROOT / "ui" / "app.py"
DEFAULT_CATALOG = PROJECT_ROOT / "examples" / "anagram_cases.yaml"

def echo(msg: str): print(f"[dev_up] {msg}", flush=True)
def fail(msg: str, code: int = 1): echo(f"❌ {msg}"); sys.exit(code)

@dataclass
class Settings:
    api_host: str
    api_port: int
    ui_port: int
    catalog_path: str

    @property
    def api_url(self) -> str:
        # 0.0.0.0 is a bind address, not something a client can connect to
        host = "127.0.0.1" if self.api_host in ("0.0.0.0", "0") else self.api_host
        return f"http://{host}:{self.api_port}"

def load_settings() -> Settings:
    """Read launcher settings from the environment (after .env is loaded)."""
    env_path = PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    return Settings(
        api_host=os.getenv("API_HOST", "127.0.0.1"),
        api_port=int(os.getenv("API_PORT", "8000")),
        ui_port=int(os.getenv("UI_PORT", "8501")),
        catalog_path=os.getenv("CATALOG_PATH", str(DEFAULT_CATALOG)),
    )

def child_env(settings: Settings, base: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    env = dict(os.environ if base is None else base)
    paths = [str(PROJECT_ROOT), str(SRC_DIR)]
    if env.get("PYTHONPATH"):
        paths.append(env["PYTHONPATH"])
    env["PYTHONPATH"] = os.pathsep.join(paths)
    env["API_URL"] = settings.api_url
    env["CATALOG_PATH"] = settings.catalog_path
    env.setdefault("STREAMLIT_BROWSER_GATHER_USAGE_STATS", "false")
    return env

def validate_catalog(path: str) -> int:
    """Load the catalogue exactly as the API will and replay it; returns the case count."""
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))
    from algotrace.catalog import CaseCatalog, CatalogError
    from algotrace.engine import AnagramTraceEngine

    if not Path(path).exists():
        fail(f"Case catalogue not found: {path}")
    try:
        catalog = CaseCatalog.from_file(path)
    except CatalogError as e:
        fail(f"Catalogue validation failed: {e}")
    wrong = [o.case.name for o in catalog.run(AnagramTraceEngine()) if not o.passed]
    if wrong:
        fail(f"Catalogue expectations disagree with the engine: {', '.join(wrong)}")
    return len(catalog.cases)

def api_command(settings: Settings) -> List[str]:
    return [sys.executable, "-m", "uvicorn", API_APP,
            "--host", settings.api_host, "--port", str(settings.api_port), "--reload"]

def ui_command(settings: Settings) -> List[str]:
    return [sys.executable, "-m", "streamlit", "run", str(UI_FILE),
            "--server.port", str(settings.ui_port), "--server.headless", "true"]

def wait_healthy(url: str, proc: subprocess.Popen, timeout: float = 60.0) -> bool:
    deadline = time.time() + timeout
    while time.time() < deadline:
        if proc.poll() is not None:
            return False
        try:
            if requests.get(url, timeout=2).status_code == 200:
                return True
        except requests.RequestException:
            pass
        time.sleep(0.4)
    return False

def main():
    settings = load_settings()
    echo(f"Checking {settings.catalog_path} ...")
    echo(f"✅ {validate_catalog(settings.catalog_path)} canned cases agree with the engine")

    env = child_env(settings)
    procs: List[subprocess.Popen] = []
    try:
        echo(f"▶ API → {settings.api_url}")
        procs.append(subprocess.Popen(api_command(settings), cwd=str(PROJECT_ROOT), env=env))
        if not wait_healthy(f"{settings.api_url}/health", procs[0]):
            fail("API did not become healthy; see its output above.")
        echo(f"▶ UI → http://localhost:{settings.ui_port}  (API docs: {settings.api_url}/docs)")
        procs.append(subprocess.Popen(ui_command(settings), cwd=str(PROJECT_ROOT), env=env))
        while all(p.poll() is None for p in procs):
            time.sleep(0.5)
    except KeyboardInterrupt:
        echo("🛑 Ctrl+C pressed, shutting down...")
    finally:
        for p in procs:
            if p.poll() is None:
                p.terminate()
                try:
                    p.wait(timeout=5)
                except subprocess.TimeoutExpired:
                    p.kill()
        echo("✅ All processes stopped.")

if __name__ == "__main__":
    main()
