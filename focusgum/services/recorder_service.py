# -*- coding: utf-8 -*-

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from focusgum.core.errors import EmptyTagError, SessionStateError
from focusgum.core.session_engine import EngineSnapshot, SessionEngine
from focusgum.core.stop_signal import StopSignal, StopToken
from focusgum.domain.models import SessionRecord
from focusgum.storage.repos import SessionRepo, build_record

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ActiveSession:
    tag: str
    start_time: datetime
    record: Optional[SessionRecord] = None
    _finish_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def finished(self) -> bool:
        return self.record is not None


class SessionRecorder:
    """
    Orchestrates:
    - SessionEngine state
    - one CSV append per completed session
    - callbacks for the presentation layer
    """

    def __init__(self, session_repo: SessionRepo, clock: Callable[[], datetime] = datetime.now):
        self.session_repo = session_repo
        self.clock = clock
        self.engine = SessionEngine()
        self._active: Optional[ActiveSession] = None
        self._on_state_change: Optional[Callable[[EngineSnapshot], None]] = None

    # ----- Callbacks -----
    def set_on_state_change(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_state_change = fn

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.engine.snapshot(self.clock()))

    # ----- Public API -----
    def get_snapshot(self) -> EngineSnapshot:
        return self.engine.snapshot(self.clock())

    def start(self, tag: Optional[str]) -> ActiveSession:
        tag = (tag or "").strip()
        if not tag:
            raise EmptyTagError()
        if self._active is not None:
            raise SessionStateError("A focus session is already running.")

        self.engine.start(tag, self.clock())
        self._active = ActiveSession(tag=tag, start_time=self.engine.started_at)
        logger.info("Focus session started: %r at %s", tag, self._active.start_time)
        self._emit_state_change()
        return self._active

    def await_stop(self, session: ActiveSession, token: StopToken) -> StopSignal:
        """Block until the token fires. There is no timeout."""
        if session is not self._active:
            raise SessionStateError("This session is not the running one.")
        stop = token.wait()
        logger.debug("Stop received for %r (%s)", session.tag, stop.name)
        return stop

    def finish(
        self,
        session: ActiveSession,
        describe: Optional[Callable[[], Optional[str]]] = None,
    ) -> SessionRecord:
        """
        Close the session and append its record.
        Calling it again for the same session returns the stored record
        without writing anything.
        """
        with session._finish_lock:
            if session.record is not None:
                logger.debug("Session %r already finished; ignoring repeat stop", session.tag)
                return session.record
            if session is not self._active:
                raise SessionStateError("This session is not the running one.")

            minutes = self.engine.stop(self.clock())
            end_time = self.engine.stopped_at
            self._emit_state_change()

            try:
                description = describe() if describe is not None else None
                record = build_record(
                    start=session.start_time,
                    end=end_time,
                    minutes=minutes,
                    tag=session.tag,
                    description=description,
                )
                self.session_repo.append(record)
                session.record = record
            finally:
                self._active = None
                self.engine.close()
                self._emit_state_change()

        logger.info("Logged %d min for %r", record.duration_minutes, record.tag)
        return record

    def run(
        self,
        tag: Optional[str],
        token: StopToken,
        describe: Optional[Callable[[], Optional[str]]] = None,
    ) -> SessionRecord:
        """start -> await_stop -> finish in one call."""
        session = self.start(tag)
        self.await_stop(session, token)
        return self.finish(session, describe=describe)
