"""Read model describing a stopwatch at one instant."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StopwatchSnapshot(BaseModel):
    """Immutable copy of a :class:`Stopwatch`'s counters."""

    name: str
    running: bool
    interval_start: Optional[float] = None
    elapsed: float = 0.0
    laps: List[float] = Field(default_factory=list)
    last_timepoint: float = 0.0

    model_config = ConfigDict(frozen=True)

    @property
    def lap_count(self) -> int:
        return len(self.laps)

    @property
    def mean_lap(self) -> float:
        return sum(self.laps) / len(self.laps) if self.laps else 0.0


__all__ = ["StopwatchSnapshot"]
