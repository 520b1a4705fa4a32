"""Market data models: quotes, loaded stock snapshots, and realtime ticks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stockcast.prediction.models import Prediction, PricePoint


def _as_float(value: Any) -> float:
    return float(value) if value is not None else 0.0


@dataclass(frozen=True)
class Quote:
    """Latest quote for a symbol, mirroring Finnhub's ``/quote`` payload."""

    current: float  # c
    change: float  # d
    percent_change: float  # dp
    high: float  # h
    low: float  # l
    open: float  # o
    previous_close: float  # pc
    volume: float | None = None  # v, absent on the free tier

    @classmethod
    def from_finnhub(cls, payload: dict[str, Any]) -> Quote:
        """Build a Quote from a raw Finnhub response dict.

        Null change fields (returned for unknown symbols) become 0.0.
        """
        volume = payload.get("v")
        return cls(
            current=_as_float(payload.get("c")),
            change=_as_float(payload.get("d")),
            percent_change=_as_float(payload.get("dp")),
            high=_as_float(payload.get("h")),
            low=_as_float(payload.get("l")),
            open=_as_float(payload.get("o")),
            previous_close=_as_float(payload.get("pc")),
            volume=float(volume) if volume is not None else None,
        )

    @property
    def is_positive(self) -> bool:
        return self.percent_change >= 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "current": self.current,
            "change": self.change,
            "percentChange": self.percent_change,
            "high": self.high,
            "low": self.low,
            "open": self.open,
            "previousClose": self.previous_close,
            "volume": self.volume,
            "isPositive": self.is_positive,
        }


@dataclass
class StockSnapshot:
    """Everything the dashboard shows after loading a symbol."""

    symbol: str
    quote: Quote
    history: list[PricePoint]
    sma20: list[float | None]
    prediction: Prediction | None
    is_mock_history: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "quote": self.quote.to_dict(),
            "history": [p.to_dict() for p in self.history],
            "sma20": self.sma20,
            "prediction": self.prediction.to_dict() if self.prediction else None,
            "isMockHistory": self.is_mock_history,
        }


@dataclass
class PriceTick:
    """One simulated realtime price update pushed to WebSocket clients."""

    symbol: str
    price: float
    label: str
    labels: list[str] = field(default_factory=list)
    closes: list[float] = field(default_factory=list)
    sma20: list[float | None] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "tick",
            "symbol": self.symbol,
            "price": self.price,
            "label": self.label,
            "labels": self.labels,
            "closes": self.closes,
            "sma20": self.sma20,
        }
