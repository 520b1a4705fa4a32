"""Periodic realtime price loop broadcasting simulated ticks over WebSocket."""

from __future__ import annotations

import asyncio

import structlog
from fastapi import FastAPI

log = structlog.get_logger(__name__)


async def realtime_update_loop(app: FastAPI) -> None:
    """Advance the price simulator and broadcast each tick until cancelled.

    Each iteration sleeps for the configured tick interval, then, if a stock
    is loaded and clients are connected, pushes one simulated price through
    the realtime window and broadcasts it.

    Args:
        app: The FastAPI application with hub, simulator and settings on state.
    """
    tick_interval = app.state.settings.simulation.tick_interval

    log.info("realtime_update_loop_started", interval=tick_interval)

    while True:
        try:
            await asyncio.sleep(tick_interval)

            simulator = app.state.simulator
            if simulator.symbol is None:
                continue

            hub = app.state.hub
            if not hub.connections:
                continue

            tick = simulator.tick()
            await hub.broadcast(tick.to_dict())

        except asyncio.CancelledError:
            log.info("realtime_update_loop_cancelled")
            break
        except Exception:
            log.warning("realtime_update_loop_error", exc_info=True)
            await asyncio.sleep(1)
