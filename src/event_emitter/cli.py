"""Typer CLI for event-emitter."""

from __future__ import annotations

import json
import platform
import time

import typer

from event_emitter.config import apply_settings, load_settings
from event_emitter.core.mixin import EventEmitter
from event_emitter.logging import configure_logging, get_logger

app = typer.Typer(no_args_is_help=True)


@app.command()
def doctor() -> None:
    """Print environment diagnostics."""

    settings = load_settings()
    configure_logging(settings)
    defaults = apply_settings(settings)
    info = {
        "python": platform.python_version(),
        "platform": platform.platform(),
        "default_max_listeners": defaults.default_max_listeners,
        "paths": {
            "home": str(settings.paths.base_dir),
            "logs": str(settings.paths.logs_dir),
        },
    }
    typer.echo(json.dumps(info, indent=2))


@app.command()
def settings(key: str | None = typer.Argument(None)) -> None:
    """Display current settings or a specific section."""

    data = load_settings().model_dump()
    if key:
        data = data.get(key, {})
    typer.echo(json.dumps(data, indent=2, default=str))


@app.command()
def bench(
    listeners: int = typer.Option(100_000, min=1, help="Listeners to register on one key."),
    key: str = typer.Option("hot", help="Event key to emit."),
) -> None:
    """Time a single emission over many listeners."""

    settings = load_settings()
    configure_logging(settings)
    logger = get_logger("bench")

    calls = 0

    def on_event() -> None:
        nonlocal calls
        calls += 1

    emitter = EventEmitter().set_max_listeners(listeners)
    for _ in range(listeners):
        emitter.on(key, on_event)

    started = time.perf_counter()
    emitter.emit(key)
    elapsed = time.perf_counter() - started

    logger.info("Emitted {} to {} listeners in {:.4f}s", key, calls, elapsed)
    typer.echo(json.dumps({"key": key, "listeners": calls, "seconds": round(elapsed, 6)}, indent=2))


if __name__ == "__main__":
    app()
