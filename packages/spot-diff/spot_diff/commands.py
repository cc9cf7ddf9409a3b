"""Round-control commands and the typed queue that routes them."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from spot_diff.targets import TargetSet
from spot_diff.types import SurfaceRect


@dataclass(frozen=True)
class Click:
    """Pointer press on the clickable surface."""
    x: float
    y: float
    surface: SurfaceRect


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class NewRound:
    """Start over, optionally with a different target set."""
    targets: TargetSet | None = None


@dataclass(frozen=True)
class DismissWin:
    pass


class CommandQueue:
    """Routes presentation-layer commands to typed handlers between ticks.

    One handler per command class, dispatched by type, FIFO order.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[[Any], bool]] = {}
        self._pending: deque[Any] = deque()

    def handle(self, cmd_type: type[Any], handler: Callable[[Any], bool]) -> None:
        """Register ``handler(cmd) -> bool`` for a command type.

        Return True to accept, False to reject. Later calls overwrite.
        """
        self._handlers[cmd_type] = handler

    def enqueue(self, cmd: Any) -> None:
        self._pending.append(cmd)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self) -> list[tuple[Any, bool]]:
        """Process all pending commands. Returns ``[(cmd, accepted), ...]``.

        Raises ``TypeError`` if no handler is registered for a command's type.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            cmd = self._pending.popleft()
            handler = self._handlers.get(type(cmd))
            if handler is None:
                raise TypeError(
                    f"No handler registered for {type(cmd).__qualname__}"
                )
            results.append((cmd, handler(cmd)))
        return results
