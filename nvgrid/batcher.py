"""Collects draw commands and forwards them in batches."""

from __future__ import annotations

import queue
from typing import Any, Protocol


class _Sender(Protocol):
    def send(self, message: Any) -> None: ...


class DrawCommandBatcher:
    """Queues draw commands until a batch of them is sent on."""

    def __init__(self, batched_draw_command_sender: _Sender) -> None:
        self._pending: queue.SimpleQueue[Any] = queue.SimpleQueue()
        self._sender = batched_draw_command_sender

    def queue(self, draw_command: Any) -> None:
        """Add a command to the current batch."""
        self._pending.put(draw_command)

    def _drain(self) -> list[Any]:
        batch = []
        while True:
            try:
                batch.append(self._pending.get_nowait())
            except queue.Empty:
                return batch

    def send_batch(self) -> None:
        """Send every queued command, in order, as one list."""
        self._sender.send(self._drain())