"""Typed SQLite read/write abstraction for the watchlist and saved predictions.

All SQL is isolated behind DashboardStore. Prices are stored as TEXT and
restored as float on read.
"""

import time
from collections.abc import Iterable

from stockcast.logging import get_logger
from stockcast.prediction.models import Prediction
from stockcast.storage.database import DashboardDatabase
from stockcast.storage.models import PredictionRecord

logger = get_logger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class DashboardStore:
    """Async store for watchlist symbols and prediction history.

    Usage:
        async with DashboardDatabase("data/stockcast.db") as database:
            store = DashboardStore(database)
            await store.add_to_watchlist("AAPL")
    """

    def __init__(self, database: DashboardDatabase) -> None:
        self._database = database

    # ──────────────────────────────────────────────
    # Watchlist
    # ──────────────────────────────────────────────

    async def seed_watchlist(self, symbols: Iterable[str]) -> int:
        """Insert default symbols only when the watchlist table is empty.

        Returns the number of symbols inserted.
        """
        cursor = await self._database.db.execute("SELECT COUNT(*) FROM watchlist")
        row = await cursor.fetchone()
        if row and row[0] > 0:
            return 0

        inserted = 0
        for symbol in symbols:
            if await self.add_to_watchlist(symbol):
                inserted += 1
        logger.info("watchlist_seeded", count=inserted)
        return inserted

    async def get_watchlist(self) -> list[str]:
        """Return watchlist symbols in the order they were added."""
        cursor = await self._database.db.execute(
            "SELECT symbol FROM watchlist ORDER BY position ASC"
        )
        rows = await cursor.fetchall()
        return [row[0] for row in rows]

    async def add_to_watchlist(self, symbol: str) -> bool:
        """Append a symbol. Returns False if it is already present."""
        symbol = symbol.strip().upper()
        cursor = await self._database.db.execute(
            "INSERT OR IGNORE INTO watchlist (symbol, position, added_at) "
            "SELECT ?, COALESCE(MAX(position), -1) + 1, ? FROM watchlist",
            (symbol, _now_ms()),
        )
        await self._database.db.commit()
        added = cursor.rowcount > 0
        if added:
            logger.debug("watchlist_added", symbol=symbol)
        return added

    async def remove_from_watchlist(self, symbol: str) -> bool:
        """Remove a symbol. Returns False if it was not in the watchlist."""
        symbol = symbol.strip().upper()
        cursor = await self._database.db.execute(
            "DELETE FROM watchlist WHERE symbol = ?", (symbol,)
        )
        await self._database.db.commit()
        removed = cursor.rowcount > 0
        if removed:
            logger.debug("watchlist_removed", symbol=symbol)
        return removed

    # ──────────────────────────────────────────────
    # Prediction history
    # ──────────────────────────────────────────────

    async def save_prediction(
        self,
        symbol: str,
        prediction: Prediction,
        saved_at: int | None = None,
    ) -> PredictionRecord:
        """Persist a prediction snapshot and return the stored record."""
        saved_at = saved_at if saved_at is not None else _now_ms()
        symbol = symbol.strip().upper()
        cursor = await self._database.db.execute(
            "INSERT INTO prediction_history "
            "(saved_at, symbol, price_at_prediction, predicted_price, signal) "
            "VALUES (?, ?, ?, ?, ?)",
            (
                saved_at,
                symbol,
                repr(prediction.last_price),
                repr(prediction.predicted_price),
                prediction.signal.value,
            ),
        )
        await self._database.db.commit()

        record = PredictionRecord(
            id=cursor.lastrowid or 0,
            saved_at=saved_at,
            symbol=symbol,
            price_at_prediction=prediction.last_price,
            predicted_price=prediction.predicted_price,
            signal=prediction.signal.value,
        )
        logger.info(
            "prediction_saved",
            symbol=symbol,
            signal=record.signal,
            predicted_price=record.predicted_price,
        )
        return record

    async def get_prediction_history(self) -> list[PredictionRecord]:
        """Return saved predictions, newest first."""
        cursor = await self._database.db.execute(
            "SELECT id, saved_at, symbol, price_at_prediction, predicted_price, signal "
            "FROM prediction_history ORDER BY saved_at DESC, id DESC"
        )
        rows = await cursor.fetchall()
        return [
            PredictionRecord(
                id=row[0],
                saved_at=row[1],
                symbol=row[2],
                price_at_prediction=float(row[3]),
                predicted_price=float(row[4]),
                signal=row[5],
            )
            for row in rows
        ]

    async def clear_history(self) -> int:
        """Delete all saved predictions. Returns the number removed."""
        cursor = await self._database.db.execute("DELETE FROM prediction_history")
        await self._database.db.commit()
        logger.info("prediction_history_cleared", removed=cursor.rowcount)
        return cursor.rowcount
