"""Tests for CommandQueue."""
from dataclasses import dataclass

import pytest

from spot_diff import Click, CommandQueue, Restart, SurfaceRect


@dataclass(frozen=True)
class Ping:
    n: int


class TestCommandQueue:

    def test_dispatch_by_type_in_fifo_order(self):
        queue = CommandQueue()
        seen = []
        queue.handle(Ping, lambda cmd: seen.append(cmd.n) or True)
        queue.enqueue(Ping(1))
        queue.enqueue(Ping(2))
        assert queue.pending() == 2

        results = queue.drain()

        assert seen == [1, 2]
        assert results == [(Ping(1), True), (Ping(2), True)]
        assert queue.pending() == 0

    def test_rejection_is_reported(self):
        queue = CommandQueue()
        queue.handle(Restart, lambda cmd: False)
        queue.enqueue(Restart())
        assert queue.drain() == [(Restart(), False)]

    def test_later_handler_overwrites(self):
        queue = CommandQueue()
        queue.handle(Ping, lambda cmd: False)
        queue.handle(Ping, lambda cmd: True)
        queue.enqueue(Ping(0))
        assert queue.drain() == [(Ping(0), True)]

    def test_unhandled_type_raises(self):
        queue = CommandQueue()
        queue.enqueue(Ping(0))
        with pytest.raises(TypeError, match="Ping"):
            queue.drain()

    def test_commands_are_frozen_values(self):
        rect = SurfaceRect(left=0, top=0, width=480, height=480)
        assert Click(x=1, y=2, surface=rect) == Click(x=1, y=2, surface=rect)
