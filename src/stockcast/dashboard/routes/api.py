"""JSON API endpoints for stock loading, predictions, watchlist, history and ticker."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from stockcast.exceptions import QuoteUnavailableError
from stockcast.market_data.models import StockSnapshot
from stockcast.market_data.simulator import ticker_snapshot

log = structlog.get_logger(__name__)

router = APIRouter()


async def _load(request: Request, symbol: str) -> StockSnapshot:
    """Load a stock and make it the current one for the realtime feed."""
    snapshot = await request.app.state.quote_service.load_stock(symbol)
    request.app.state.current_snapshot = snapshot
    request.app.state.simulator.reset(
        snapshot.symbol, snapshot.quote.current, snapshot.history
    )
    return snapshot


def _quote_error(symbol: str, error: QuoteUnavailableError) -> JSONResponse:
    log.warning("stock_load_failed", symbol=symbol, error=str(error))
    return JSONResponse(
        status_code=502,
        content={"error": "Failed to fetch price data", "detail": str(error)},
    )


@router.get("/stocks/{symbol}")
async def get_stock(request: Request, symbol: str) -> JSONResponse:
    """Quote, daily history, SMA(20) overlay and prediction for a symbol."""
    try:
        snapshot = await _load(request, symbol)
    except QuoteUnavailableError as e:
        return _quote_error(symbol, e)
    return JSONResponse(content=snapshot.to_dict())


@router.get("/stocks/{symbol}/prediction")
async def get_stock_prediction(request: Request, symbol: str) -> JSONResponse:
    """Prediction only. ``prediction`` is null when history is too short.

    Leaves the current stock and the realtime feed untouched.
    """
    try:
        snapshot = await request.app.state.quote_service.load_stock(symbol)
    except QuoteUnavailableError as e:
        return _quote_error(symbol, e)
    prediction = snapshot.prediction
    return JSONResponse(content={
        "symbol": snapshot.symbol,
        "prediction": prediction.to_dict() if prediction else None,
    })


@router.get("/realtime")
async def get_realtime(request: Request) -> JSONResponse:
    """Current realtime chart window with its SMA overlay."""
    simulator = request.app.state.simulator
    window = simulator.window
    return JSONResponse(content={
        "symbol": simulator.symbol,
        "price": simulator.base_price,
        "labels": window.labels,
        "closes": window.closes,
        "sma20": window.sma,
    })


@router.get("/ticker")
async def get_ticker(request: Request) -> JSONResponse:
    """Scrolling ticker strip values."""
    symbols = request.app.state.settings.dashboard.ticker_symbols
    return JSONResponse(content=ticker_snapshot(symbols))


# ---------------------------------------------------------------------------
# Watchlist
# ---------------------------------------------------------------------------


@router.get("/watchlist")
async def get_watchlist(request: Request) -> JSONResponse:
    store = request.app.state.store
    return JSONResponse(content=await store.get_watchlist())


@router.post("/watchlist/{symbol}")
async def add_to_watchlist(request: Request, symbol: str) -> JSONResponse:
    """Add a symbol; 200 with ``added: false`` if it was already present."""
    store = request.app.state.store
    added = await store.add_to_watchlist(symbol)
    if added:
        log.info("watchlist_symbol_added", symbol=symbol.upper())
    return JSONResponse(content={
        "added": added,
        "watchlist": await store.get_watchlist(),
    })


@router.delete("/watchlist/{symbol}")
async def remove_from_watchlist(request: Request, symbol: str) -> JSONResponse:
    store = request.app.state.store
    removed = await store.remove_from_watchlist(symbol)
    if not removed:
        return JSONResponse(
            status_code=404,
            content={"error": f"{symbol.upper()} is not in the watchlist"},
        )
    return JSONResponse(content={"watchlist": await store.get_watchlist()})


# ---------------------------------------------------------------------------
# Prediction history
# ---------------------------------------------------------------------------


@router.get("/history")
async def get_history(request: Request) -> JSONResponse:
    """Saved predictions, newest first."""
    store = request.app.state.store
    records = await store.get_prediction_history()
    return JSONResponse(content=[r.to_dict() for r in records])


@router.post("/history")
async def save_prediction(request: Request) -> JSONResponse:
    """Save the prediction of the currently loaded stock."""
    snapshot: StockSnapshot | None = getattr(request.app.state, "current_snapshot", None)
    if snapshot is None:
        return JSONResponse(status_code=409, content={"error": "No stock loaded"})
    if snapshot.prediction is None:
        return JSONResponse(
            status_code=422,
            content={"error": f"Insufficient data to predict {snapshot.symbol}"},
        )

    record = await request.app.state.store.save_prediction(
        snapshot.symbol, snapshot.prediction
    )
    return JSONResponse(status_code=201, content=record.to_dict())


@router.delete("/history")
async def clear_history(request: Request) -> JSONResponse:
    removed = await request.app.state.store.clear_history()
    return JSONResponse(content={"removed": removed})
