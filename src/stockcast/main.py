"""Entry point for the stock dashboard backend.

Wires all components together and serves the FastAPI dashboard through
uvicorn's programmatic API. Startup and shutdown run in the FastAPI
lifespan context manager.

Component wiring order (in _build_components):
1. FinnhubClient (quote/candle fetch)
2. QuoteService (stock loading + prediction)
3. PriceSimulator (realtime drift feed)
4. DashboardDatabase / DashboardStore (watchlist and history persistence)
"""

import asyncio
import random
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI

from stockcast.config import AppSettings
from stockcast.exceptions import QuoteUnavailableError
from stockcast.logging import get_logger, setup_logging
from stockcast.market_data.finnhub import FinnhubClient
from stockcast.market_data.quote_service import QuoteService
from stockcast.market_data.simulator import PriceSimulator
from stockcast.storage.database import DashboardDatabase
from stockcast.storage.store import DashboardStore


def _build_components(settings: AppSettings) -> dict[str, Any]:
    """Build all dashboard components from settings.

    Does NOT open the database; that happens in the lifespan.

    Args:
        settings: Application-wide settings.

    Returns:
        Dict mapping component names to instances.
    """
    rng = random.Random(settings.simulation.seed)

    client = FinnhubClient(settings.finnhub)
    quote_service = QuoteService(
        client,
        history_days=settings.finnhub.history_days,
        rng=rng,
    )
    simulator = PriceSimulator(settings.simulation, rng=rng)
    database = DashboardDatabase(settings.storage.db_path)
    store = DashboardStore(database)

    return {
        "finnhub_client": client,
        "quote_service": quote_service,
        "simulator": simulator,
        "database": database,
        "store": store,
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage component lifecycle within the FastAPI application.

    On startup: stores components on app.state, opens the database, seeds
    the default watchlist, preloads the default symbol, and starts the
    realtime update loop.

    On shutdown: cancels the update loop and closes the database.
    """
    from stockcast.dashboard.update_loop import realtime_update_loop

    logger = get_logger("stockcast.main")
    settings: AppSettings = app.state.settings
    components = app.state.components

    app.state.quote_service = components["quote_service"]
    app.state.simulator = components["simulator"]
    app.state.store = components["store"]

    database: DashboardDatabase = components["database"]
    await database.connect()
    await components["store"].seed_watchlist(settings.storage.default_watchlist)

    default_symbol = settings.dashboard.default_symbol
    try:
        snapshot = await components["quote_service"].load_stock(default_symbol)
    except QuoteUnavailableError as e:
        logger.warning("default_symbol_unavailable", symbol=default_symbol, error=str(e))
    else:
        app.state.current_snapshot = snapshot
        components["simulator"].reset(
            snapshot.symbol, snapshot.quote.current, snapshot.history
        )

    update_task = asyncio.create_task(realtime_update_loop(app))

    logger.info("lifespan_started", default_symbol=default_symbol)

    yield

    update_task.cancel()
    try:
        await update_task
    except asyncio.CancelledError:
        pass

    await database.close()

    logger.info("stockcast_stopped")


async def run() -> None:
    """Run the dashboard server."""
    settings = AppSettings()

    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("stockcast.main")

    components = _build_components(settings)

    from stockcast.dashboard.app import create_dashboard_app

    app = create_dashboard_app(lifespan=lifespan)
    app.state.settings = settings
    app.state.components = components

    logger.info(
        "starting_dashboard",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
    )

    config = uvicorn.Config(
        app,
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        log_level="warning",  # Suppress uvicorn access logs
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
