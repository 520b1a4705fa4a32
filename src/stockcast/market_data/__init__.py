"""Market data layer -- quotes, daily history, mock fallback, and realtime simulation."""

from stockcast.market_data.finnhub import FinnhubClient
from stockcast.market_data.mock import generate_mock_history
from stockcast.market_data.models import PriceTick, Quote, StockSnapshot
from stockcast.market_data.quote_service import QuoteService
from stockcast.market_data.simulator import PriceSimulator, ticker_snapshot

__all__ = [
    "FinnhubClient",
    "PriceSimulator",
    "PriceTick",
    "Quote",
    "QuoteService",
    "StockSnapshot",
    "generate_mock_history",
    "ticker_snapshot",
]
