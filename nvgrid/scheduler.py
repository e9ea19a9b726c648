"""Decides whether the renderer needs to draw another frame."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class RedrawScheduler:
    """Tracks queued frames and the earliest scheduled future redraw.

    Times are values of ``clock`` (``time.monotonic`` by default).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._scheduled_frame: float | None = None
        self._frame_queued = True

    def schedule(self, new_scheduled: float) -> None:
        """Request a redraw at the given time, keeping the earliest request."""
        logger.debug("Redraw scheduled for %r", new_scheduled)
        with self._lock:
            if self._scheduled_frame is None or new_scheduled < self._scheduled_frame:
                self._scheduled_frame = new_scheduled

    def queue_next_frame(self) -> None:
        """Request a redraw on the next frame."""
        logger.debug("Next frame queued")
        self._frame_queued = True

    def should_draw(self) -> bool:
        """Whether to draw now; consumes the request that made it true."""
        if self._frame_queued:
            self._frame_queued = False
            return True
        with self._lock:
            scheduled = self._scheduled_frame
            if scheduled is not None and scheduled < self._clock():
                self._scheduled_frame = None
                return True
            return False


REDRAW_SCHEDULER = RedrawScheduler()