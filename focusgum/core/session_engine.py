# -*- coding: utf-8 -*-

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from focusgum.core.errors import SessionStateError

IDLE = "idle"
RUNNING = "running"
STOPPING = "stopping"


@dataclass
class EngineSnapshot:
    state: str  # idle | running | stopping
    tag: Optional[str]
    started_at: Optional[datetime]
    elapsed_sec: int


def duration_minutes(start: datetime, end: datetime) -> int:
    """Whole minutes between start and end, rounded up, never below 1."""
    elapsed = max(0, int((end - start).total_seconds()))
    return max(1, math.ceil(elapsed / 60))


class SessionEngine:
    """
    Pure lifecycle of one focus session (no I/O).
    Idle -> Running (start) -> Stopping (stop) -> Idle (close).
    """

    def __init__(self):
        self.state = IDLE
        self.tag: Optional[str] = None
        self.started_at: Optional[datetime] = None
        self.stopped_at: Optional[datetime] = None

    def snapshot(self, now: Optional[datetime] = None) -> EngineSnapshot:
        elapsed = 0
        if self.started_at is not None:
            until = self.stopped_at or now or self.started_at
            elapsed = max(0, int((until - self.started_at).total_seconds()))
        return EngineSnapshot(
            state=self.state,
            tag=self.tag,
            started_at=self.started_at,
            elapsed_sec=elapsed,
        )

    def start(self, tag: str, now: datetime) -> None:
        if self.state != IDLE:
            raise SessionStateError(f"Cannot start a session while {self.state}.")
        self.state = RUNNING
        self.tag = tag
        self.started_at = now.replace(microsecond=0)
        self.stopped_at = None

    def stop(self, now: datetime) -> int:
        """
        Freeze the end time and return the duration in minutes.
        A clock that moved backwards is clamped to the start time.
        """
        if self.state != RUNNING:
            raise SessionStateError(f"Cannot stop a session while {self.state}.")
        end = now.replace(microsecond=0)
        if end < self.started_at:
            end = self.started_at
        self.stopped_at = end
        self.state = STOPPING
        return duration_minutes(self.started_at, end)

    def close(self) -> None:
        self.state = IDLE
        self.tag = None
        self.started_at = None
        self.stopped_at = None
