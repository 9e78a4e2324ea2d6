# -*- coding: utf-8 -*-

import datetime as dt
import logging
from typing import Dict, List, Optional, Union

from focusgum.domain.models import DaySummary, LogScan, SessionLine
from focusgum.storage.repos import SessionRepo

logger = logging.getLogger(__name__)

DayLike = Union[dt.date, str]


def _day_key(day: DayLike) -> str:
    if isinstance(day, dt.datetime):
        return day.date().isoformat()
    if isinstance(day, dt.date):
        return day.isoformat()
    return str(day).strip()


def _as_date(day: DayLike) -> dt.date:
    if isinstance(day, dt.datetime):
        return day.date()
    if isinstance(day, dt.date):
        return day
    try:
        return dt.date.fromisoformat(str(day).strip())
    except ValueError:
        raise ValueError("Invalid date. Use YYYY-MM-DD.")


class LogAggregator:
    """
    Read-only queries over the whole focus log.

    Rows that cannot be parsed are skipped and counted, never fatal.
    Only an unreadable file raises (LogUnavailableError).
    """

    def __init__(self, session_repo: SessionRepo, daily_goal: int = 120):
        self.session_repo = session_repo
        self.daily_goal = int(daily_goal)

    def scan(self) -> LogScan:
        return self.session_repo.scan()

    def summarize(self, day: DayLike) -> DaySummary:
        key = _day_key(day)
        scan = self.scan()
        per_tag: Dict[str, int] = {}
        total = 0
        for record in scan.records:
            if record.date != key:
                continue
            per_tag[record.tag] = per_tag.get(record.tag, 0) + record.duration_minutes
            total += record.duration_minutes
        return DaySummary(
            day=key,
            per_tag_minutes=per_tag,
            total_minutes=total,
            skipped_rows=scan.skipped_rows,
        )

    def daily_totals(self, scan: Optional[LogScan] = None) -> Dict[str, int]:
        scan = scan or self.scan()
        totals: Dict[str, int] = {}
        for record in scan.records:
            totals[record.date] = totals.get(record.date, 0) + record.duration_minutes
        return totals

    def compute_streak(self, today: DayLike, goal: Optional[int] = None) -> int:
        goal = self.daily_goal if goal is None else int(goal)
        totals = self.daily_totals()

        day = _as_date(today)
        streak = 0
        while day.isoformat() in totals and totals[day.isoformat()] >= goal:
            streak += 1
            day -= dt.timedelta(days=1)

        logger.debug("Streak as of %s with goal %d: %d", _day_key(today), goal, streak)
        return streak

    def list_day(self, day: DayLike) -> List[SessionLine]:
        key = _day_key(day)
        return [r.clock_times() for r in self.scan().records if r.date == key]
