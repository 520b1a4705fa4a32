"""Finnhub REST client for quotes and daily candles.

Uses urllib.request (stdlib) in a worker thread so the event loop is never
blocked. Transport and payload problems are translated into
QuoteUnavailableError / HistoryUnavailableError at this boundary.
"""

from __future__ import annotations

import asyncio
import json
import time
import urllib.parse
import urllib.request
from datetime import datetime, timezone
from typing import Any

from stockcast.config import FinnhubSettings
from stockcast.exceptions import HistoryUnavailableError, QuoteUnavailableError
from stockcast.logging import get_logger
from stockcast.market_data.models import Quote
from stockcast.prediction.models import PricePoint

logger = get_logger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def _format_date(timestamp: int) -> str:
    """Render a Unix-seconds candle timestamp as a UTC ``YYYY-MM-DD`` label."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%Y-%m-%d")


class FinnhubClient:
    """Thin async wrapper over the Finnhub ``/quote`` and ``/stock/candle`` endpoints.

    Args:
        settings: API key, base URL, timeout and history depth.
    """

    def __init__(self, settings: FinnhubSettings) -> None:
        self._settings = settings

    def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        """Blocking GET returning decoded JSON. Raises OSError/ValueError on failure."""
        query = urllib.parse.urlencode(
            {**params, "token": self._settings.api_key.get_secret_value()}
        )
        url = f"{self._settings.base_url}{path}?{query}"
        headers = {"Accept": "application/json", "User-Agent": "Stockcast/0.1"}
        req = urllib.request.Request(url, headers=headers)
        with urllib.request.urlopen(req, timeout=self._settings.timeout_seconds) as resp:
            return json.loads(resp.read())

    async def fetch_quote(self, symbol: str) -> Quote:
        """Fetch the latest quote for ``symbol``.

        Raises:
            QuoteUnavailableError: On transport/decoding errors, or when the
                payload has no current price (Finnhub's reply for unknown symbols).
        """
        try:
            payload = await asyncio.to_thread(self._get_json, "/quote", {"symbol": symbol})
        except (OSError, ValueError) as e:
            logger.error("quote_fetch_error", symbol=symbol, error=str(e))
            raise QuoteUnavailableError(f"Failed to fetch quote for {symbol}: {e}") from e

        if not isinstance(payload, dict) or not payload.get("c"):
            logger.warning("quote_empty", symbol=symbol)
            raise QuoteUnavailableError(f"No price data for {symbol}")

        return Quote.from_finnhub(payload)

    async def fetch_history(self, symbol: str, days: int | None = None) -> list[PricePoint]:
        """Fetch daily closes for the last ``days`` days, oldest first.

        Raises:
            HistoryUnavailableError: On transport errors or a non-"ok" status
                (the free tier often refuses candle access).
        """
        days = days if days is not None else self._settings.history_days
        to_ts = int(time.time())
        from_ts = to_ts - days * SECONDS_PER_DAY
        params = {"symbol": symbol, "resolution": "D", "from": from_ts, "to": to_ts}

        try:
            payload = await asyncio.to_thread(self._get_json, "/stock/candle", params)
        except (OSError, ValueError) as e:
            raise HistoryUnavailableError(f"Failed to fetch history for {symbol}: {e}") from e

        if not isinstance(payload, dict) or payload.get("s") != "ok":
            raise HistoryUnavailableError(f"No history available for {symbol}")

        timestamps = payload.get("t") or []
        closes = payload.get("c") or []
        history = [
            PricePoint(date=_format_date(ts), close=float(close))
            for ts, close in zip(timestamps, closes)
        ]
        logger.debug("history_fetched", symbol=symbol, points=len(history))
        return history
