# -*- coding: utf-8 -*-

import logging
import signal
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

logger = logging.getLogger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


@dataclass(frozen=True)
class StopSignal:
    signum: Optional[int]  # None when stopped programmatically

    @property
    def name(self) -> str:
        if self.signum is None:
            return "manual"
        return signal.Signals(self.signum).name


class StopToken:
    """
    Cancellation channel for a running session.

    trigger() may be called from any thread. Signal handlers go through
    on_signal(), which only stores the signal number: a handler must not
    take the Event's internal lock, since the interrupted main thread may
    already hold it.
    """

    def __init__(self, poll_interval: float = 0.25):
        self.poll_interval = poll_interval
        self._event = threading.Event()
        self._signum: Optional[int] = None

    def trigger(self) -> None:
        self._event.set()

    def on_signal(self, signum, frame=None) -> None:
        if self._signum is None:
            self._signum = signum

    def is_set(self) -> bool:
        return self._signum is not None or self._event.is_set()

    def wait(self) -> StopSignal:
        # no timeout: only a trigger or a signal ends the wait
        while not self.is_set():
            self._event.wait(self.poll_interval)
        return StopSignal(signum=self._signum)


@contextmanager
def handle_stop_signals(
    token: StopToken, signals: Sequence[int] = STOP_SIGNALS
) -> Iterator[StopToken]:
    """Route stop signals into the token; restore previous handlers on exit."""
    previous = {}
    for sig in signals:
        previous[sig] = signal.signal(sig, token.on_signal)
    logger.debug("Stop signals routed to token: %s", [signal.Signals(s).name for s in signals])
    try:
        yield token
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
