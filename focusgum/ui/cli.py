# -*- coding: utf-8 -*-

"""focus-gum command line.

    focus-gum                  interactive menu
    focus-gum start [TAG...]   run a focus session until Ctrl+C
    focus-gum summary          today's minutes per tag and the streak
    focus-gum sessions         table of today's sessions
    focus-gum open             open the CSV log
"""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

import click

from focusgum.app import FocusApp, build_app
from focusgum.config import load_config
from focusgum.core.errors import EmptyTagError, FocusGumError, LogUnavailableError
from focusgum.core.stop_signal import handle_stop_signals
from focusgum.domain.models import DaySummary, SessionRecord
from focusgum.logging_setup import configure_logging
from focusgum.ui import render

logger = logging.getLogger(__name__)

MENU_ITEMS = ("start focus", "summary", "sessions", "open csv", "quit")
DESCRIPTION_PLACEHOLDER = (
    "Quickly reflect: What went well? What distracted you? One thing to improve next time."
)


def cli_entrypoint() -> None:
    """Run the CLI with readable errors instead of tracebacks."""
    err = render.make_console(stderr=True)
    try:
        main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except click.Abort:
        err.print("\n◈ Bye", style="info")
        sys.exit(130)
    except FocusGumError as e:
        render.print_error(err, str(e))
        sys.exit(1)


def _parse_day(ctx, param, value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter("use YYYY-MM-DD")


@click.group(invoke_without_command=True)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="CSV log to use (default: $FOCUS_GUM_CSV or ~/focus_log.csv)",
)
@click.option("--goal", type=click.IntRange(min=0), default=None, help="Daily goal in minutes for the streak")
@click.option("--debug", is_flag=True, help="Verbose logging on stderr")
@click.pass_context
def main(ctx: click.Context, log_path: Optional[Path], goal: Optional[int], debug: bool) -> None:
    """Minimal focus tracker: start/stop focus sessions into a CSV log."""
    if ctx.obj is None:
        config = load_config(log_path=log_path, daily_goal=goal, debug=debug or None)
        configure_logging(debug=config.debug)
        ctx.obj = build_app(config)

    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)


# ── Core session flow ──────────────────────────────────────────
def prompt_tag(app: FocusApp) -> str:
    render.print_header(app.console, "What will you focus on?", "(e.g. protein-design, writing)")
    return click.prompt("➤", default="", show_default=False)


def prompt_description(app: FocusApp) -> str:
    app.console.print("📝 Add a description for this session:", style="header")
    app.console.print(DESCRIPTION_PLACEHOLDER, style="subheader")
    try:
        return click.prompt("Session Description", default="", show_default=False)
    except click.Abort:
        # EOF on the prompt; keep the session, drop the description
        return ""


def run_focus(app: FocusApp, tag: str) -> Optional[SessionRecord]:
    if not tag.strip():
        tag = prompt_tag(app)

    try:
        session = app.recorder.start(tag)
    except EmptyTagError:
        render.print_error(app.console, "No tag given")
        return None

    render.print_focusing(app.console, session.tag, str(session.start_time))

    token = app.make_token()
    with handle_stop_signals(token):
        app.recorder.await_stop(session, token)
        app.console.print()
        try:
            record = app.recorder.finish(session, describe=lambda: prompt_description(app))
        except LogUnavailableError as e:
            render.print_error(app.console, f"Session not logged: {e}")
            return None

    render.print_logged(app.console, record)
    return record


# ── Summary & sessions ─────────────────────────────────────────
def _empty_summary(day: date) -> DaySummary:
    return DaySummary(day=day.isoformat(), per_tag_minutes={}, total_minutes=0)


def show_summary(app: FocusApp, day: Optional[date] = None) -> None:
    day = day or app.today()
    try:
        summary = app.aggregator.summarize(day)
        streak = app.aggregator.compute_streak(day)
    except LogUnavailableError as e:
        logger.warning("%s; showing no data", e)
        summary, streak = _empty_summary(day), 0
    render.print_summary(app.console, summary, streak)


def show_sessions(app: FocusApp, day: Optional[date] = None) -> None:
    today = app.today()
    day = day or today
    try:
        lines = app.aggregator.list_day(day)
    except LogUnavailableError as e:
        logger.warning("%s; showing no data", e)
        lines = []
    render.print_sessions(app.console, day.isoformat(), lines, is_today=(day == today))


def open_log(app: FocusApp, pager: bool = False) -> bool:
    path = app.session_repo.path
    render.print_header(app.console, "📄  Opening CSV file", str(path))

    if not path.is_file():
        render.print_error(app.console, f"CSV file not found: {path}")
        return False

    if pager:
        click.echo_via_pager(path.read_text(encoding="utf-8"))
        return True

    if click.launch(str(path)) != 0:
        render.print_error(app.console, f"Could not open {path}")
        return False
    app.console.print("✅ Opened CSV file", style="success")
    return True


# ── Commands ───────────────────────────────────────────────────
@main.command()
@click.argument("tag", nargs=-1)
@click.pass_obj
def start(app: FocusApp, tag) -> None:
    """Start a focus session; Ctrl+C stops and logs it."""
    if run_focus(app, " ".join(tag)) is None:
        sys.exit(1)


@main.command()
@click.option("--day", callback=_parse_day, default=None, help="Day to summarize (YYYY-MM-DD, default today)")
@click.pass_obj
def summary(app: FocusApp, day: Optional[date]) -> None:
    """Minutes per tag for the day, plus the current streak."""
    show_summary(app, day)


@main.command()
@click.option("--day", callback=_parse_day, default=None, help="Day to list (YYYY-MM-DD, default today)")
@click.pass_obj
def sessions(app: FocusApp, day: Optional[date]) -> None:
    """Table of the day's sessions in log order."""
    show_sessions(app, day)


@main.command(name="open")
@click.option("--pager", is_flag=True, help="Page the file in the terminal instead")
@click.pass_obj
def open_cmd(app: FocusApp, pager: bool) -> None:
    """Open the CSV log with the system's default application."""
    if not open_log(app, pager=pager):
        sys.exit(1)


# ── Interactive menu ───────────────────────────────────────────
def run_menu(app: FocusApp) -> None:
    while True:
        app.console.print("🧠 Focus Session Menu", style="header")
        for i, item in enumerate(MENU_ITEMS, start=1):
            app.console.print(f"  [cursor]{i}[/cursor] {item}")
        index = click.prompt("➤", type=click.IntRange(1, len(MENU_ITEMS)))
        choice = MENU_ITEMS[index - 1]
        app.console.print()

        if choice == "start focus":
            run_focus(app, "")
        elif choice == "summary":
            show_summary(app)
        elif choice == "sessions":
            show_sessions(app)
        elif choice == "open csv":
            open_log(app)
        elif choice == "quit":
            return
        app.console.print()
