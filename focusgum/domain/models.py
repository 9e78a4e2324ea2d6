# -*- coding: utf-8 -*-

from dataclasses import dataclass, field
from typing import Dict, List

DATE_FMT = "%Y-%m-%d"
TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class SessionRecord:
    date: str  # yyyy-mm-dd, day of start_time
    start_time: str  # yyyy-mm-dd HH:MM:SS
    end_time: str
    duration_minutes: int
    tag: str
    description: str = ""

    def clock_times(self) -> "SessionLine":
        """Same record with the date prefix dropped from start/end."""
        prefix = f"{self.date} "
        return SessionLine(
            start_clock=self.start_time.replace(prefix, "", 1),
            end_clock=self.end_time.replace(prefix, "", 1),
            duration_minutes=self.duration_minutes,
            tag=self.tag,
            description=self.description,
        )


@dataclass(frozen=True)
class SessionLine:
    start_clock: str
    end_clock: str
    duration_minutes: int
    tag: str
    description: str = ""


@dataclass(frozen=True)
class DaySummary:
    day: str
    per_tag_minutes: Dict[str, int]
    total_minutes: int
    skipped_rows: int = 0


@dataclass
class LogScan:
    records: List[SessionRecord] = field(default_factory=list)
    skipped_rows: int = 0
