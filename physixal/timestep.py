"""Frame delta time."""

import math
from dataclasses import dataclass

__all__ = ["Timestep"]


@dataclass(frozen=True)
class Timestep:
    """A span of time in seconds between two frames."""

    time: float = 0.0

    def __float__(self) -> float:
        return float(self.time)

    @property
    def frames_per_second(self) -> float:
        """Frames per second at this frame time; infinite for a zero step."""
        if self.time == 0:
            return math.inf
        return 1000.0 / self.time / 1000.0

    @property
    def seconds(self) -> float:
        return float(self.time)

    @property
    def milliseconds(self) -> float:
        return self.time * 1000.0