"""Process runner: logging setup, the serve loop and the console-script entry."""

from __future__ import annotations

import asyncio
import logging
import sys

from railpack_heartbeat.config import LoggingConfig, RuntimeConfig
from railpack_heartbeat.core.scheduler import AsyncioScheduler
from railpack_heartbeat.emitter import create_emitter
from railpack_heartbeat.observability.event_bus import Event, InMemoryEventBus

logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig) -> logging.Handler:
    """Attach a stderr handler to the package logger; stdout carries the heartbeat lines only."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.format))
    package_logger = logging.getLogger(__package__)
    package_logger.addHandler(handler)
    package_logger.setLevel(config.level)
    return handler


def log_emission(event: Event) -> None:
    logger.debug("Emitted %s #%d at %s", event.event_type, event.seq, event.ts)


async def serve(config: RuntimeConfig | None = None) -> None:
    """Start the emitter and keep the process alive until cancelled."""
    config = config or RuntimeConfig()
    scheduler = AsyncioScheduler()
    bus = InMemoryEventBus(max_history=config.emitter.event_history)
    bus.subscribe(log_emission)
    emitter = create_emitter(scheduler=scheduler, config=config.emitter, event_bus=bus)
    await emitter.start()
    try:
        await scheduler.wait()
    finally:
        scheduler.cancel_all()


def main() -> None:
    config = RuntimeConfig()
    configure_logging(config.logging)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
