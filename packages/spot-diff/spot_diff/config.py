"""Round configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration shared by every round.

    Attributes:
        canonical_size: Surface width in pixels that ``tolerance_px`` is tuned for.
        tolerance_px: Hit radius in pixels at the canonical size.
        scale_tolerance: Scale the radius with the actual surface width. When
            False the radius is ``tolerance_px`` at every size.
        tps: Ticks per second of the round clock.
        feedback_seconds: Lifetime of hit/miss messages.
        hit_text: Message shown for a hit that does not finish the round.
        miss_text: Message shown for a miss.
        win_text: Message shown when the last difference is found.
    """

    canonical_size: int = 480
    tolerance_px: float = 35.0
    scale_tolerance: bool = False
    tps: int = 20
    feedback_seconds: float = 1.7
    hit_text: str = "Good eye! Difference found."
    miss_text: str = "No difference found there. Try again!"
    win_text: str = "Congratulations! You found all differences!"

    def __post_init__(self) -> None:
        if self.canonical_size <= 0:
            raise ValueError("canonical_size must be positive")
        if self.tolerance_px < 0:
            raise ValueError("tolerance_px must be non-negative")
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if self.feedback_seconds <= 0:
            raise ValueError("feedback_seconds must be positive")

    @property
    def feedback_ticks(self) -> int:
        return max(1, round(self.feedback_seconds * self.tps))

    def radius_for(self, width: float) -> float:
        """Hit radius in pixels for a surface *width* pixels wide."""
        if not self.scale_tolerance:
            return self.tolerance_px
        return self.tolerance_px * width / self.canonical_size
