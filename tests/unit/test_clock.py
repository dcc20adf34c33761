import pytest

from core.timing.clock import NS_PER_SEC, now_monotonic_ns, seconds_between


def test_seconds_between_splits_whole_and_fraction():
    assert seconds_between(0, 2 * NS_PER_SEC + 500_000_000) == pytest.approx(2.5)
    assert seconds_between(NS_PER_SEC, NS_PER_SEC) == 0.0
    assert seconds_between(10, 11) == pytest.approx(1e-9)


def test_monotonic_never_goes_backwards():
    readings = [now_monotonic_ns() for _ in range(1000)]
    assert readings == sorted(readings)
