"""
Test suite for configuration module
"""

from bank_ledger import config as config_module
from bank_ledger.config import LedgerConfig, get_config, reload_config


class TestLedgerConfig:
    """Test environment-based configuration"""

    def teardown_method(self):
        reload_config()

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "DISPLAY_PLACES"):
            monkeypatch.delenv(f"BANK_LEDGER_{name}", raising=False)

        cfg = LedgerConfig(_env_file=None)
        assert cfg.log_level == "INFO"
        assert cfg.log_format == "json"
        assert cfg.log_file is None
        assert cfg.display_places == 2

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BANK_LEDGER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("BANK_LEDGER_LOG_FORMAT", "text")
        monkeypatch.setenv("BANK_LEDGER_DISPLAY_PLACES", "4")

        cfg = LedgerConfig(_env_file=None)
        assert cfg.log_level == "DEBUG"
        assert cfg.log_format == "text"
        assert cfg.display_places == 4

    def test_env_prefix_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("bank_ledger_log_level", "WARNING")
        assert LedgerConfig(_env_file=None).log_level == "WARNING"

    def test_reload_config_replaces_global(self, monkeypatch):
        original = get_config()
        monkeypatch.setenv("BANK_LEDGER_LOG_LEVEL", "ERROR")

        reloaded = reload_config()
        assert reloaded is not original
        assert get_config() is reloaded
        assert config_module.config is reloaded
        assert reloaded.log_level == "ERROR"
