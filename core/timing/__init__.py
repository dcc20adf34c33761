from core.timing.stopwatch import REJECTED, Rejection, Stopwatch
from core.timing.snapshot import StopwatchSnapshot

__all__ = ["REJECTED", "Rejection", "Stopwatch", "StopwatchSnapshot"]
