# services/boxscore_cache.py
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Dict, Optional

from services.config import BOXSCORE_WORKERS
from services.models import BoxscoreSnapshot

log = logging.getLogger("dugout.boxscore_cache")

Loader = Callable[[int], BoxscoreSnapshot]


class BoxscoreCache:
    """
    game_id -> BoxscoreSnapshot, for the life of the process.

    Only successful loads are stored. A failed load returns None and the next
    request tries again. Requests for a game that is already loading wait on
    the same Future instead of starting a second fetch.

    Entries are never refreshed: a snapshot taken while a game was live stays
    as it was.
    """

    def __init__(self, loader: Loader, max_workers: int = BOXSCORE_WORKERS):
        self._loader = loader
        self._lock = threading.Lock()
        self._store: Dict[int, BoxscoreSnapshot] = {}
        self._inflight: Dict[int, Future] = {}
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="boxscore")

    def __contains__(self, game_id) -> bool:
        with self._lock:
            return int(game_id) in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def peek(self, game_id: int) -> Optional[BoxscoreSnapshot]:
        with self._lock:
            return self._store.get(int(game_id))

    def get(self, game_id: int) -> Optional[BoxscoreSnapshot]:
        """Blocking lookup; loads on the calling thread when nobody else is."""
        gid = int(game_id)
        with self._lock:
            hit = self._store.get(gid)
            if hit is not None:
                return hit
            fut = self._inflight.get(gid)
            owner = fut is None
            if owner:
                fut = Future()
                self._inflight[gid] = fut

        if owner:
            self._run(gid, fut)
        return fut.result()

    def submit(self, game_id: int) -> "Future[Optional[BoxscoreSnapshot]]":
        """Non-blocking lookup. The Future resolves to the snapshot or None."""
        gid = int(game_id)
        with self._lock:
            hit = self._store.get(gid)
            if hit is not None:
                done: Future = Future()
                done.set_result(hit)
                return done
            fut = self._inflight.get(gid)
            if fut is not None:
                return fut
            fut = Future()
            self._inflight[gid] = fut

        try:
            self._pool.submit(self._run, gid, fut)
        except RuntimeError as e:
            # pool already shut down
            log.warning("boxscore load not scheduled game_id=%s: %s", gid, e)
            with self._lock:
                self._inflight.pop(gid, None)
            fut.set_result(None)
        return fut

    def _run(self, gid: int, fut: Future) -> None:
        snapshot: Optional[BoxscoreSnapshot] = None
        try:
            snapshot = self._loader(gid)
        except Exception as e:
            log.warning("boxscore load failed game_id=%s: %s", gid, e)
            snapshot = None
        finally:
            with self._lock:
                if snapshot is not None:
                    self._store[gid] = snapshot
                self._inflight.pop(gid, None)
            fut.set_result(snapshot)

    def close(self) -> None:
        self._pool.shutdown(wait=False)
