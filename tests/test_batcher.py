import queue

import pytest

from nvgrid.batcher import DrawCommandBatcher
from nvgrid.channels import LoggingSender


def make_batcher(maxsize=0):
    received = queue.Queue(maxsize=maxsize)
    return DrawCommandBatcher(LoggingSender(received, "batched_draw_command")), received


def test_send_batch_keeps_order():
    batcher, received = make_batcher()
    for command in ["a", "b", "c"]:
        batcher.queue(command)
    batcher.send_batch()
    assert received.get_nowait() == ["a", "b", "c"]


def test_batch_is_drained_after_sending():
    batcher, received = make_batcher()
    batcher.queue("first")
    batcher.send_batch()
    batcher.send_batch()
    assert received.get_nowait() == ["first"]
    assert received.get_nowait() == []


def test_batches_are_separate():
    batcher, received = make_batcher()
    batcher.queue(1)
    batcher.send_batch()
    batcher.queue(2)
    batcher.queue(3)
    batcher.send_batch()
    assert [received.get_nowait(), received.get_nowait()] == [[1], [2, 3]]


def test_send_errors_propagate():
    batcher, received = make_batcher(maxsize=1)
    batcher.send_batch()
    with pytest.raises(queue.Full):
        batcher.send_batch()
    assert received.qsize() == 1