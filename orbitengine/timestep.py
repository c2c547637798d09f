"""Frame time step."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Timestep:
    """Time elapsed between two frames, in seconds."""

    time: float = 0.0

    def __float__(self) -> float:
        return float(self.time)

    @property
    def seconds(self) -> float:
        """The step in seconds."""
        return float(self.time)

    @property
    def milliseconds(self) -> float:
        """The step in milliseconds."""
        return float(self.time) * 1000.0