import os
from pathlib import Path

import pytest
import dev_up

def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("API_HOST", "0.0.0.0")
    monkeypatch.setenv("API_PORT", "9001")
    monkeypatch.setenv("UI_PORT", "9002")
    monkeypatch.delenv("CATALOG_PATH", raising=False)
    s = dev_up.load_settings()
    assert s.api_url == "http://127.0.0.1:9001"
    assert s.ui_port == 9002
    assert s.catalog_path == str(dev_up.DEFAULT_CATALOG)
    assert "--port" in dev_up.api_command(s) and "9001" in dev_up.api_command(s)
    assert str(dev_up.UI_FILE) in dev_up.ui_command(s)

def test_child_env_puts_project_and_src_first():
    s = dev_up.Settings(api_host="localhost", api_port=8000, ui_port=8501, catalog_path="cases.yaml")
    env = dev_up.child_env(s, base={"PYTHONPATH": "/extra"})
    assert env["PYTHONPATH"].split(os.pathsep) == [str(dev_up.PROJECT_ROOT), str(dev_up.SRC_DIR), "/extra"]
    assert env["API_URL"] == "http://localhost:8000"
    assert env["CATALOG_PATH"] == "cases.yaml"

def test_validate_bundled_catalog():
    assert dev_up.validate_catalog(str(dev_up.DEFAULT_CATALOG)) == 11

@pytest.mark.parametrize("text", [
    "cases: [unclosed",
    'cases:\n  - { s1: "ab", s2: "ba", expected: false }\n',
])
def test_validate_rejects_bad_catalog(tmp_path, text):
    path = tmp_path / "cases.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(SystemExit):
        dev_up.validate_catalog(str(path))

def test_validate_missing_catalog(tmp_path):
    with pytest.raises(SystemExit):
        dev_up.validate_catalog(str(tmp_path / "nope.yaml"))
