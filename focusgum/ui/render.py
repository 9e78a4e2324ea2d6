# -*- coding: utf-8 -*-

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from focusgum.domain.models import DaySummary, SessionLine, SessionRecord

# 256-colour palette of the original gum script
FOCUS_THEME = Theme(
    {
        "header": "bold color(51)",
        "subheader": "dim color(117)",
        "info": "color(117)",
        "success": "bold color(82)",
        "focus": "color(201)",
        "error": "color(196)",
        "cell": "color(254)",
        "cursor": "color(226)",
    }
)


def make_console(stderr: bool = False, **kwargs) -> Console:
    return Console(theme=FOCUS_THEME, stderr=stderr, highlight=False, **kwargs)


def print_header(console: Console, title: str, subtitle: Optional[str] = None) -> None:
    console.print(title, style="header")
    if subtitle:
        console.print(subtitle, style="subheader", markup=False)
    console.print()


def print_error(console: Console, message: str) -> None:
    console.print(f"✖ {message}", style="error", markup=False)


# ---------- Summary ----------
def print_streak(console: Console, streak: int) -> None:
    if streak:
        console.print(f"🔥 Streak: {streak} day{'s' * (streak != 1)}")
    else:
        console.print("No active streak 😴")


def print_summary(console: Console, summary: DaySummary, streak: int) -> None:
    print_header(console, f"🧠  Focus Summary for {summary.day}")

    for tag, minutes in summary.per_tag_minutes.items():
        console.print(f"- {tag}: {minutes} min", markup=False)

    console.print()
    if summary.total_minutes > 0:
        console.print(f"Total: {summary.total_minutes} min", style="success")
    else:
        console.print("Total: 0 min", style="info")

    if summary.skipped_rows:
        console.print(f"({summary.skipped_rows} unreadable row(s) ignored)", style="subheader")

    console.print()
    print_streak(console, streak)


# ---------- Sessions ----------
def build_sessions_table(lines: List[SessionLine]) -> Table:
    table = Table(
        box=box.ROUNDED,
        border_style="focus",
        header_style="bold color(201)",
        style="cell",
    )
    table.add_column("Start Time")
    table.add_column("End Time")
    table.add_column("Duration (min)", justify="right")
    table.add_column("Tag")
    table.add_column("Description", overflow="fold")
    for line in lines:
        table.add_row(
            line.start_clock,
            line.end_clock,
            str(line.duration_minutes),
            Text(line.tag),
            Text(line.description),
        )
    return table


def print_sessions(console: Console, day: str, lines: List[SessionLine], is_today: bool = True) -> None:
    when = "today" if is_today else day
    print_header(console, "📋  Today's Focus Sessions" if is_today else "📋  Focus Sessions", day)
    if not lines:
        console.print(f"No focus sessions recorded for {when}", style="info")
        console.print()
        return
    console.print(build_sessions_table(lines))
    console.print()


# ---------- Session lifecycle ----------
def print_focusing(console: Console, tag: str, start_time: str) -> None:
    console.print(f"▶  Focusing: {tag}  ({start_time})", style="focus", markup=False)
    console.print("Press Ctrl+C when done…", style="info")


def print_logged(console: Console, record: SessionRecord) -> None:
    console.print(f"✅ Logged {record.duration_minutes} min for: {record.tag}", style="success", markup=False)
