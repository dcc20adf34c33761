from __future__ import annotations

import logging
import time
from typing import Optional

import typer
from pydantic import ValidationError

from config.settings import StopwatchSettings, get_settings
from core.timing.stopwatch import REJECTED, Stopwatch


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def _root() -> None:
    """Time a delay with the monotonic stopwatch."""


@app.command()
def run(
    delay: Optional[float] = typer.Option(
        None, "--delay", "-d", min=0.0, help="Seconds to wait while the stopwatch runs (default: STOPWATCH_DEMO_DELAY)"
    ),
    laps: int = typer.Option(0, "--laps", "-l", min=0, help="Split the delay into this many recorded laps"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override STOPWATCH_LOG_LEVEL"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Label for the stopwatch"),
) -> None:
    """Start a stopwatch, wait, stop it and report the elapsed time."""

    try:
        if log_level is None:
            settings = get_settings(force_refresh=True)
        else:
            settings = StopwatchSettings(log_level=log_level)
    except ValidationError as exc:
        typer.echo(f"[stopwatch] invalid settings: {exc}", err=True)
        raise typer.Exit(code=2)

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    wait = settings.demo_delay if delay is None else delay

    sw = Stopwatch(name=name) if name else Stopwatch()
    sw.start()
    if laps:
        for _ in range(laps):
            time.sleep(wait / laps)
            sw.lap()
    else:
        time.sleep(wait)
    elapsed = sw.stop()

    if elapsed == REJECTED:  # pragma: no cover - stop() follows a successful start()
        typer.echo(f"[stopwatch] stop rejected ({sw.last_rejection})", err=True)
        raise typer.Exit(code=1)

    for i in range(sw.get_lap_count()):
        typer.echo(f"Lap {i + 1}: {settings.format_seconds(sw.get_lap(i))}")
    typer.echo(f"Runtime: {settings.format_seconds(elapsed)}")


if __name__ == "__main__":
    app()
