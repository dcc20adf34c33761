from __future__ import annotations
import time
NS_PER_SEC = 1_000_000_000
def now_monotonic_ns() -> int: return time.monotonic_ns()
def seconds_between(start_ns: int, end_ns: int) -> float:
    whole, frac = divmod(end_ns - start_ns, NS_PER_SEC)
    return whole + frac / NS_PER_SEC
