import json
from unittest.mock import AsyncMock, patch

import pytest

from swaglabs_e2e import cli
from swaglabs_e2e.report import RunReport, ScenarioResult
from swaglabs_e2e.scenarios import scenarios_tagged


def report_with(status):
    report = RunReport(base_url="https://www.saucedemo.com/", browser="chromium")
    report.add(ScenarioResult(name="app_loads", title="Loads", status=status, duration_ms=100))
    return report.finish()


class TestCli:
    """Test suite for the command line entry point"""

    def test_list(self, capsys):
        assert cli.main(["--list"]) == 0

        out = capsys.readouterr().out
        assert "standard_checkout" in out
        assert "tags: checkout, performance, smoke" in out

    def test_unknown_scenario_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            cli.main(["-s", "does_not_exist"])

        assert exc.value.code == 2

    def test_defaults_to_smoke_tag(self, monkeypatch):
        monkeypatch.delenv("SAUCEDEMO_BROWSER", raising=False)
        with patch("swaglabs_e2e.cli.run", new=AsyncMock(return_value=report_with("passed"))) as mock_run:
            assert cli.main([]) == 0

        config, scenarios = mock_run.await_args.args
        assert [s.name for s in scenarios] == [s.name for s in scenarios_tagged("smoke")]
        assert config.browser == "chromium"

    def test_explicit_scenarios_skip_default_tag(self):
        with patch("swaglabs_e2e.cli.run", new=AsyncMock(return_value=report_with("passed"))) as mock_run:
            cli.main(["-s", "standard_checkout", "--browser", "webkit", "--headed"])

        config, scenarios = mock_run.await_args.args
        assert [s.name for s in scenarios] == ["standard_checkout"]
        assert config.browser == "webkit"
        assert config.headless is False

    def test_failure_exit_code_and_report(self, tmp_path):
        path = tmp_path / "report.json"

        with patch("swaglabs_e2e.cli.run", new=AsyncMock(return_value=report_with("failed"))):
            code = cli.main(["-t", "smoke", "--report", str(path)])

        assert code == 1
        data = json.loads(path.read_text())
        assert data["results"][0]["status"] == "failed"

    def test_interrupt(self):
        with patch("swaglabs_e2e.cli.asyncio.run", side_effect=KeyboardInterrupt):
            assert cli.main([]) == 130

    def test_unknown_tag_is_usage_error(self):
        with patch("swaglabs_e2e.cli.run", new=AsyncMock()) as mock_run:
            with pytest.raises(SystemExit) as exc:
                cli.main(["-t", "smkoe"])

        assert exc.value.code == 2
        mock_run.assert_not_called()

    def test_empty_selection_fails(self):
        with patch("swaglabs_e2e.cli.select_scenarios", return_value=[]), \
                patch("swaglabs_e2e.cli.run", new=AsyncMock()) as mock_run:
            assert cli.main(["-t", "smoke"]) == 1

        mock_run.assert_not_called()
