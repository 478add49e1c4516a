"""
Tests for logging setup
"""
import json
import logging
import pytest
from hornlog import HornLogConfig, Tokenizer, Rule, PrefixIRIResolver, builtin, bvar, literal
from hornlog.logging_config import StructuredFormatter, setup_logging, setup_logging_from_config

EX = "http://example.org/rules#"


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Test root and component logger configuration"""

    def test_console_handler(self):
        setup_logging("WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert logging.getLogger("hornlog.tokenizer").level == logging.WARNING

    def test_debug_enables_components(self):
        setup_logging("debug")
        assert logging.getLogger("hornlog.tokenizer").level == logging.DEBUG
        assert logging.getLogger("hornlog.rules").level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "hornlog.log"
        setup_logging("DEBUG", log_file=log_file)
        Tokenizer("p(?x) -> q(?x)")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Tokenized 11 tokens" in log_file.read_text()

    def test_from_config(self, tmp_path):
        config = HornLogConfig(log_level="ERROR", log_file=str(tmp_path / "h.log"))
        setup_logging_from_config(config)
        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert len(root.handlers) == 2


class TestStructuredFormatter:
    """Test JSON log formatting"""

    def test_format(self):
        record = logging.LogRecord("hornlog.rules", logging.INFO, __file__, 10,
                                   "resolved %d atoms", (3,), None)
        record.extra_fields = {"rule": "r1"}
        entry = json.loads(StructuredFormatter().format(record))
        assert entry["message"] == "resolved 3 atoms"
        assert entry["logger"] == "hornlog.rules"
        assert entry["level"] == "INFO"
        assert entry["rule"] == "r1"

    def test_unbound_decisions_carry_fields(self, caplog):
        """Binding decisions are logged with structured fields"""
        resolver = PrefixIRIResolver(default_namespace=EX)
        with caplog.at_level(logging.DEBUG, logger="hornlog.rules"):
            Rule("r", [builtin("swrlb:add", bvar("z"), literal(1))], [], resolver)

        records = [r for r in caplog.records if hasattr(r, "extra_fields")]
        assert len(records) == 1
        entry = json.loads(StructuredFormatter().format(records[0]))
        assert entry["event_type"] == "unbound_argument"
        assert entry["builtin"] == "swrlb:add"
        assert entry["variable"] == "z"
