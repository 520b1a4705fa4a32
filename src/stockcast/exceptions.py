"""Custom exceptions for the stock dashboard.

The prediction engine never raises for data conditions; these cover the
market data boundary only.
"""


class StockcastError(Exception):
    """Base exception for all dashboard errors."""


class QuoteUnavailableError(StockcastError):
    """Raised when a quote cannot be fetched or carries no usable price."""


class HistoryUnavailableError(StockcastError):
    """Raised when daily candle history cannot be fetched for a symbol."""
