"""
Test suite for the demonstration driver

Checks the printed balances, that arguments are ignored and that
repeated runs are independent.
"""

import logging
import pytest

from bank_ledger.demo import main, run_demo

EXPECTED = [
    "Checking balance: 1000.00",
    "Checking balance after transfer: 700.00",
    "Savings balance: 300.00",
]


@pytest.fixture(autouse=True)
def restore_ledger_logger():
    """main() configures the package logger; undo it for other tests"""
    yield
    logger = logging.getLogger("bank_ledger")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestDemo:
    """Test the demo scenario"""

    def test_run_demo_lines(self):
        assert run_demo() == EXPECTED

    def test_run_demo_custom_places(self):
        assert run_demo(places=0)[0] == "Checking balance: 1000"

    @pytest.mark.parametrize("argv", [None, [], ["foo", "bar", "--whatever=123"]])
    def test_main_prints_expected_output(self, argv, capsys):
        assert main(argv) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == EXPECTED

    def test_main_twice_same_output(self, capsys):
        main([])
        first = capsys.readouterr().out
        main(["x"])
        second = capsys.readouterr().out
        assert first == second

    def test_logs_stay_off_stdout(self, capsys, monkeypatch):
        monkeypatch.setenv("BANK_LEDGER_LOG_LEVEL", "DEBUG")
        from bank_ledger.config import reload_config
        reload_config()
        try:
            main([])
        finally:
            monkeypatch.delenv("BANK_LEDGER_LOG_LEVEL")
            reload_config()

        captured = capsys.readouterr()
        assert captured.out.splitlines() == EXPECTED
        assert '"action": "transfer"' in captured.err
