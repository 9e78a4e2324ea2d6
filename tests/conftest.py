"""Pytest fixtures for focus-gum tests."""

from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

from focusgum.app import FocusApp, build_app
from focusgum.config import FocusConfig
from focusgum.core.stop_signal import StopToken
from focusgum.storage.log_file import HEADER_LINE, LogFile
from focusgum.storage.repos import SessionRepo


class FakeClock:
    """Settable stand-in for datetime.now."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


def write_log(path: Path, rows: list[str], header: str = HEADER_LINE) -> Path:
    """Write a log file with the given raw data lines."""
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path


def row(day: str, minutes, tag: str, description: str = "") -> str:
    return f'{day},{day} 09:00:00,{day} 10:00:00,{minutes},{tag},"{description}"'


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "focus_log.csv"


@pytest.fixture
def repo(log_path: Path) -> SessionRepo:
    return SessionRepo(LogFile(log_path))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 6, 4, 9, 0, 0))


@pytest.fixture
def triggered_token() -> StopToken:
    token = StopToken(poll_interval=0.01)
    token.trigger()
    return token


@pytest.fixture
def app(log_path: Path, clock: FakeClock, triggered_token: StopToken) -> FocusApp:
    config = FocusConfig(log_path=log_path, daily_goal=120)
    return build_app(
        config,
        clock=clock,
        make_token=lambda: triggered_token,
        today=lambda: date(2025, 6, 4),
    )
