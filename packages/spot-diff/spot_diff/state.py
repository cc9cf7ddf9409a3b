"""GameState - found differences and the win condition for one round."""
from __future__ import annotations

from spot_diff.targets import TargetSet
from spot_diff.types import AlreadyFoundError, TargetId, TargetPoint, UnknownTargetError


class GameState:
    """Progress through one TargetSet.

    Found ids only ever grow; ``reset()`` is the single way to shrink them.
    """

    def __init__(self, targets: TargetSet) -> None:
        self._targets = targets
        self._found: list[TargetId] = []
        self._found_set: set[TargetId] = set()
        self._complete = False

    @property
    def targets(self) -> TargetSet:
        return self._targets

    @property
    def found_ids(self) -> tuple[TargetId, ...]:
        """Found ids in the order they were found."""
        return tuple(self._found)

    @property
    def is_complete(self) -> bool:
        return self._complete

    def record_hit(self, target_id: TargetId) -> bool:
        """Mark *target_id* found. Returns True if this completed the round."""
        if target_id not in self._targets:
            raise UnknownTargetError(
                target_id, f"Target {target_id} is not in the current target set"
            )
        if target_id in self._found_set:
            raise AlreadyFoundError(target_id, f"Target {target_id} is already found")
        self._found.append(target_id)
        self._found_set.add(target_id)
        if len(self._found) == len(self._targets):
            self._complete = True
        return self._complete

    def reset(self) -> None:
        self._found.clear()
        self._found_set.clear()
        self._complete = False

    def found_count(self) -> int:
        return len(self._found)

    def remaining(self) -> int:
        return len(self._targets) - len(self._found)

    def progress(self) -> float:
        """Fraction of the target set found, in ``[0, 1]``."""
        return len(self._found) / len(self._targets)

    def found_points(self) -> list[TargetPoint]:
        """Found targets in discovery order, for marker overlays."""
        return [self._targets[tid] for tid in self._found]
