"""Tests for the click command line."""

from click.testing import CliRunner
import pytest

from conftest import row, write_log
from focusgum.ui.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def today_log(log_path):
    return write_log(
        log_path,
        [
            row("2025-06-02", 125, "writing"),
            row("2025-06-03", 130, "writing"),
            "2025-06-04,2025-06-04 09:00:00,2025-06-04 10:40:00,100,writing,\"drafted intro\"",
            "2025-06-04,2025-06-04 11:00:00,2025-06-04 11:25:00,25,coding,\"\"",
            row("2025-06-04", "oops", "coding"),
        ],
    )


class TestSummary:
    def test_summary_and_streak(self, runner, app, today_log):
        result = runner.invoke(main, ["summary"], obj=app)
        assert result.exit_code == 0, result.output
        assert "Focus Summary for 2025-06-04" in result.output
        assert "- writing: 100 min" in result.output
        assert "- coding: 25 min" in result.output
        assert "Total: 125 min" in result.output
        assert "1 unreadable row(s) ignored" in result.output
        assert "Streak: 3 days" in result.output

    def test_other_day(self, runner, app, today_log):
        result = runner.invoke(main, ["summary", "--day", "2025-06-03"], obj=app)
        assert result.exit_code == 0, result.output
        assert "Total: 130 min" in result.output
        assert "Streak: 2 days" in result.output

    def test_missing_log_is_no_data(self, runner, app):
        result = runner.invoke(main, ["summary"], obj=app)
        assert result.exit_code == 0, result.output
        assert "Total: 0 min" in result.output
        assert "No active streak" in result.output

    def test_bad_day(self, runner, app):
        result = runner.invoke(main, ["summary", "--day", "June 4th"], obj=app)
        assert result.exit_code == 2
        assert "YYYY-MM-DD" in result.output


class TestSessions:
    def test_table(self, runner, app, today_log):
        result = runner.invoke(main, ["sessions"], obj=app)
        assert result.exit_code == 0, result.output
        assert "Today's Focus Sessions" in result.output
        assert "09:00:00" in result.output
        assert "11:25:00" in result.output
        assert "drafted intro" in result.output
        assert "2025-06-04 09:00:00" not in result.output

    def test_no_sessions(self, runner, app):
        result = runner.invoke(main, ["sessions"], obj=app)
        assert result.exit_code == 0, result.output
        assert "No focus sessions recorded for today" in result.output


class TestStart:
    def test_start_with_tag(self, runner, app, log_path):
        result = runner.invoke(main, ["start", "protein", "design"], obj=app, input="all good\n")
        assert result.exit_code == 0, result.output
        assert "Focusing: protein design" in result.output
        assert "Logged 1 min for: protein design" in result.output

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert lines[1] == (
            '2025-06-04,2025-06-04 09:00:00,2025-06-04 09:00:00,1,protein design,"all good"'
        )

    def test_prompts_for_tag(self, runner, app, log_path):
        result = runner.invoke(main, ["start"], obj=app, input="writing\n\n")
        assert result.exit_code == 0, result.output
        assert "What will you focus on?" in result.output
        assert app.aggregator.summarize("2025-06-04").per_tag_minutes == {"writing": 1}

    def test_no_tag_given(self, runner, app, log_path):
        result = runner.invoke(main, ["start"], obj=app, input="\n")
        assert result.exit_code == 1
        assert "No tag given" in result.output
        assert not log_path.exists()


class TestOpen:
    def test_missing_file(self, runner, app):
        result = runner.invoke(main, ["open"], obj=app)
        assert result.exit_code == 1
        assert "CSV file not found" in result.output

    def test_pager(self, runner, app, today_log):
        result = runner.invoke(main, ["open", "--pager"], obj=app)
        assert result.exit_code == 0, result.output
        assert "drafted intro" in result.output

    def test_launch(self, runner, app, today_log, monkeypatch):
        launched = []
        monkeypatch.setattr("focusgum.ui.cli.click.launch", lambda path: launched.append(path) or 0)
        result = runner.invoke(main, ["open"], obj=app)
        assert result.exit_code == 0, result.output
        assert launched == [str(today_log)]


class TestMenu:
    def test_summary_then_quit(self, runner, app, today_log):
        result = runner.invoke(main, [], obj=app, input="2\n5\n")
        assert result.exit_code == 0, result.output
        assert "Focus Session Menu" in result.output
        assert "Total: 125 min" in result.output

    def test_start_focus_from_menu(self, runner, app, log_path):
        result = runner.invoke(main, [], obj=app, input="1\nreading\n\n5\n")
        assert result.exit_code == 0, result.output
        assert "Logged 1 min for: reading" in result.output
        assert len(log_path.read_text(encoding="utf-8").splitlines()) == 2


class TestConfigOptions:
    def test_options_build_app(self, runner, log_path, monkeypatch, tmp_path):
        monkeypatch.setenv("FOCUS_GUM_CONFIG", str(tmp_path / "none.yaml"))
        monkeypatch.setattr("focusgum.ui.cli.configure_logging", lambda **kwargs: None)
        write_log(log_path, [row("2025-06-04", 30, "writing")])
        result = runner.invoke(
            main, ["--log-path", str(log_path), "--goal", "10", "sessions", "--day", "2025-06-04"]
        )
        assert result.exit_code == 0, result.output
        assert "writing" in result.output
