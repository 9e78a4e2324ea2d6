#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable

from rich.console import Console

from focusgum.config import FocusConfig
from focusgum.core.stop_signal import StopToken
from focusgum.services.recorder_service import SessionRecorder
from focusgum.services.stats_service import LogAggregator
from focusgum.storage.log_file import LogFile
from focusgum.storage.repos import SessionRepo
from focusgum.ui.render import make_console


@dataclass
class FocusApp:
    config: FocusConfig
    session_repo: SessionRepo
    recorder: SessionRecorder
    aggregator: LogAggregator
    console: Console = field(default_factory=make_console)
    err_console: Console = field(default_factory=lambda: make_console(stderr=True))
    make_token: Callable[[], StopToken] = StopToken
    today: Callable[[], date] = date.today


def build_app(
    config: FocusConfig,
    clock: Callable[[], datetime] = datetime.now,
    **kwargs,
) -> FocusApp:
    log = LogFile(config.log_path)
    session_repo = SessionRepo(log)

    recorder = SessionRecorder(session_repo, clock=clock)
    aggregator = LogAggregator(session_repo, daily_goal=config.daily_goal)

    return FocusApp(
        config=config,
        session_repo=session_repo,
        recorder=recorder,
        aggregator=aggregator,
        **kwargs,
    )


def main():
    from focusgum.ui.cli import cli_entrypoint

    cli_entrypoint()


if __name__ == "__main__":
    main()
