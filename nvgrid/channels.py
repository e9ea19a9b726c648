"""Queue senders that log every message they pass on."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class _Queue(Protocol):
    def put_nowait(self, item: Any) -> None: ...


@dataclass(frozen=True)
class LoggingSender:
    """Wraps a queue and logs each message at debug level before sending it.

    Works with both ``queue.Queue`` and ``asyncio.Queue``; errors raised by the
    queue (for example when it is full) propagate to the caller.
    """

    sender: _Queue
    channel_name: str

    def send(self, message: Any) -> None:
        logger.debug("%s %r", self.channel_name, message)
        self.sender.put_nowait(message)