"""Stock loading: quote + history + prediction in a single snapshot."""

from __future__ import annotations

import random

from stockcast.exceptions import HistoryUnavailableError
from stockcast.logging import get_logger
from stockcast.market_data.finnhub import FinnhubClient
from stockcast.market_data.mock import generate_mock_history
from stockcast.market_data.models import StockSnapshot
from stockcast.prediction.engine import LONG_PERIOD, get_prediction
from stockcast.prediction.indicators import calculate_sma

logger = get_logger(__name__)


class QuoteService:
    """Loads a symbol's quote and daily history and runs the prediction engine.

    History falls back to a synthetic random walk when the candle endpoint
    is unavailable; a failed quote is not recoverable and propagates.

    Args:
        client: Finnhub client.
        history_days: Days of daily history to request.
        rng: Random source for mock history.
    """

    def __init__(
        self,
        client: FinnhubClient,
        history_days: int = 30,
        rng: random.Random | None = None,
    ) -> None:
        self._client = client
        self._history_days = history_days
        self._rng = rng or random.Random()

    async def load_stock(self, symbol: str) -> StockSnapshot:
        """Fetch everything needed to render ``symbol``.

        Raises:
            QuoteUnavailableError: If the quote cannot be fetched.
        """
        symbol = symbol.strip().upper()
        quote = await self._client.fetch_quote(symbol)

        is_mock = False
        try:
            history = await self._client.fetch_history(symbol, self._history_days)
        except HistoryUnavailableError as e:
            logger.warning("history_fallback_to_mock", symbol=symbol, reason=str(e))
            history = generate_mock_history(days=self._history_days, rng=self._rng)
            is_mock = True

        closes = [p.close for p in history]
        snapshot = StockSnapshot(
            symbol=symbol,
            quote=quote,
            history=history,
            sma20=calculate_sma(closes, LONG_PERIOD),
            prediction=get_prediction(history),
            is_mock_history=is_mock,
        )

        logger.info(
            "stock_loaded",
            symbol=symbol,
            price=quote.current,
            points=len(history),
            mock_history=is_mock,
            signal=snapshot.prediction.signal.value if snapshot.prediction else None,
        )
        return snapshot
