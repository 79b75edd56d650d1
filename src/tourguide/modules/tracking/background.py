import time
from threading import Event, Thread
from typing import Callable, List, Optional

from loguru import logger

from tourguide.core.user import User

from .tracker import LocationTracker


class BackgroundTracker:
    """
    Periodically tracks every known user on a daemon thread.
    A failed sweep is logged and the next one runs on schedule.
    """

    def __init__(
        self,
        tracker: LocationTracker,
        users: Callable[[], List[User]],
        interval_seconds: float = 300.0,
    ):
        """
        Args:
            tracker: Tracker used for each sweep.
            users: Returns the users to track; called once per sweep.
            interval_seconds: Pause between the end of one sweep and the start of the next.
        """
        self.tracker = tracker
        self.users = users
        self.interval_seconds = interval_seconds
        self.sweeps = 0
        self._stop = Event()
        self._thread: Optional[Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """
        Starts the sweep loop. A no-op while already running.

        Raises:
            RuntimeError: if a previous loop was asked to stop but is still
                finishing its sweep. Call stop() again before restarting.
        """
        if self.running:
            if not self._stop.is_set():
                return
            raise RuntimeError("Previous tracking loop is still stopping")
        # each loop owns its Event so a restart cannot revive an old loop
        self._stop = Event()
        self._thread = Thread(target=self._run, args=(self._stop,), name="background-tracker", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signals the loop to exit and waits up to `timeout` seconds for it."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if not self._thread.is_alive():
                self._thread = None

    def sweep(self) -> None:
        users = self.users()
        logger.debug(f"Begin tracker. Tracking {len(users)} users.")
        start = time.perf_counter()
        self.tracker.track_batch(users)
        elapsed = time.perf_counter() - start
        logger.debug(f"Tracker time elapsed: {elapsed:.3f} seconds.")

    def _run(self, stop: Event) -> None:
        while not stop.is_set():
            try:
                self.sweep()
            except Exception as e:
                logger.exception(f"Tracking sweep failed: {e}")
            self.sweeps += 1
            if stop.wait(self.interval_seconds):
                break
        logger.debug("Tracker stopping")
