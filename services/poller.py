import logging
import threading
from typing import Callable, Optional

from services.config import REFRESH_INTERVAL_S
from services.models import ScoreboardDay

log = logging.getLogger("dugout.poller")

OnUpdate = Callable[[ScoreboardDay], None]


class ScoreboardPoller:
    """
    Re-fetches the scoreboard for the selected date every `interval` seconds.

    Each select_date() starts a new generation and stops the previous one.
    A fetch that finishes after its generation was replaced is dropped, so
    on_update only ever sees the date that is currently selected. Delivery
    holds the lock, so select_date() and stop() wait for an update that is
    already being delivered.
    """

    # seconds to wait for a replaced poll thread; it may be mid-fetch
    join_timeout = 5.0

    def __init__(self, engine, on_update: OnUpdate, interval: float = REFRESH_INTERVAL_S,
                 eager: bool = False):
        self.engine = engine
        self.on_update = on_update
        self.interval = interval
        self.eager = eager

        # reentrant: on_update may call select_date/stop
        self._lock = threading.RLock()
        self._generation = 0
        self._date: Optional[str] = None
        self._stop: Optional[threading.Event] = None
        self._wake: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def date(self) -> Optional[str]:
        return self._date

    @property
    def generation(self) -> int:
        return self._generation

    def select_date(self, date_ymd: str) -> None:
        with self._lock:
            old = self._cancel_locked()
            self._generation += 1
            self._date = date_ymd
            stop, wake = threading.Event(), threading.Event()
            self._stop, self._wake = stop, wake
            gen = self._generation
            self._thread = threading.Thread(
                target=self._loop, args=(gen, date_ymd, stop, wake),
                name=f"poller-{date_ymd}", daemon=True,
            )
            self._thread.start()
        self._join(old)
        log.info("polling %s every %ss (generation %d)", date_ymd, self.interval, gen)

    def refresh(self) -> None:
        """Fetch now instead of waiting for the next tick."""
        with self._lock:
            if self._wake is not None:
                self._wake.set()

    def stop(self) -> None:
        with self._lock:
            old = self._cancel_locked()
            self._generation += 1
            self._date = None
        self._join(old)

    def _cancel_locked(self) -> Optional[threading.Thread]:
        if self._stop is not None:
            self._stop.set()
        if self._wake is not None:
            self._wake.set()
        old = self._thread
        self._stop = self._wake = None
        self._thread = None
        return old

    def _join(self, thread: Optional[threading.Thread]) -> None:
        if thread is None or thread is threading.current_thread():
            return
        thread.join(self.join_timeout)
        if thread.is_alive():
            log.warning("poll thread %s still running after %ss", thread.name, self.join_timeout)

    def _loop(self, gen: int, date_ymd: str, stop: threading.Event, wake: threading.Event) -> None:
        while not stop.is_set():
            self.poll_once(gen, date_ymd)
            wake.wait(self.interval)
            wake.clear()

    def poll_once(self, gen: int, date_ymd: str) -> bool:
        """Fetch and deliver one scoreboard. Returns False when the result was stale."""
        try:
            day = self.engine.games_for_date(date_ymd, eager=self.eager)
        except Exception as e:
            log.exception("poll failed for %s: %s", date_ymd, e)
            return False

        with self._lock:
            if gen != self._generation or date_ymd != self._date:
                log.info("dropping stale scoreboard for %s (generation %d)", date_ymd, gen)
                return False
            self.on_update(day)
        return True
