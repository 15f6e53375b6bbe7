"""
Integration tests for the demo runner.
"""

from collections.abc import Iterator

import orjson
import pytest

from arbscan.__main__ import main
from arbscan.config.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Run outside the project directory with fresh settings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ARBSCAN_SIMULATION_SEED", "99")
    monkeypatch.setenv("ARBSCAN_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestMain:
    """Tests for the demo entry point."""

    def test_table_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a default run prints both panels."""
        assert main() == 0

        out = capsys.readouterr().out
        assert "TRIANGULAR OPPORTUNITIES" in out
        assert "CROSS-EXCHANGE OPPORTUNITIES" in out

    def test_json_output(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test JSON mode emits a parseable document."""
        monkeypatch.setenv("ARBSCAN_JSON_OUTPUT", "1")
        monkeypatch.setenv("ARBSCAN_MIN_PROFIT_PERCENT", "-100")
        monkeypatch.setenv("ARBSCAN_RESULT_LIMIT", "5")

        assert main() == 0

        data = orjson.loads(capsys.readouterr().out)
        assert len(data["triangular"]) == 5
        assert data["stats"]["cycles_enumerated"] > 0

    def test_invalid_settings(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that a bad environment value fails with exit code 1."""
        monkeypatch.setenv("ARBSCAN_START_NOTIONAL", "-5")

        assert main() == 1
        assert "Configuration error" in capsys.readouterr().err
