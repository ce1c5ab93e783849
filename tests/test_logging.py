import json
import logging

from algotrace import logging_config
from algotrace.counts import CharCountTable
from algotrace.engine import AnagramTraceEngine

def test_json_formatter_fields():
    rec = logging.LogRecord("algotrace.engine", logging.WARNING, __file__, 1, "leftover %s", ("a",), None)
    out = json.loads(logging_config.JsonFormatter().format(rec))
    assert out["level"] == "WARNING"
    assert out["logger"] == "algotrace.engine"
    assert out["message"] == "leftover a"

def test_configure_from_env_file(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "trace.log"
    monkeypatch.setenv("ALGOTRACE_LOGGING", "debug")
    monkeypatch.setenv("ALGOTRACE_LOG_FILE", str(log_file))
    monkeypatch.delenv("ALGOTRACE_LOG_JSON", raising=False)
    try:
        logging_config.configure_from_env()
        AnagramTraceEngine().run("ab", "ba")
        for h in logging.getLogger("algotrace").handlers:
            h.flush()
        assert "run('ab', 'ba') -> True" in log_file.read_text()
    finally:
        logging_config.disable_logging()

def test_configure_from_env_noop(monkeypatch):
    monkeypatch.delenv("ALGOTRACE_LOGGING", raising=False)
    monkeypatch.delenv("ALGOTRACE_LOG_FILE", raising=False)
    before = list(logging.getLogger("algotrace").handlers)
    logging_config.configure_from_env()
    assert logging.getLogger("algotrace").handlers == before

class DoubleCountingTable(CharCountTable):
    def increment(self, c):
        super().increment(c)
        return super().increment(c)

def test_non_zero_branch_logs_warning(caplog):
    logging_config.set_level("WARNING")
    with caplog.at_level(logging.WARNING, logger="algotrace.engine"):
        AnagramTraceEngine(table_factory=DoubleCountingTable).run("a", "a")
    assert any("not empty" in r.getMessage() for r in caplog.records)
