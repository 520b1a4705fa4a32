"""Prediction engine data models.

Closes are plain IEEE754 floats so every result is bit-reproducible.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Signal(str, Enum):
    """SMA crossover signal."""

    BUY = "BUY"
    SELL = "SELL"
    NEUTRAL = "NEUTRAL"


class Trend(str, Enum):
    """Direction of the projected next close relative to the last close."""

    UP = "UP"
    DOWN = "DOWN"


@dataclass(frozen=True)
class PricePoint:
    """A single closing price. ``date`` is an opaque display label."""

    date: str
    close: float

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "close": self.close}


@dataclass(frozen=True)
class Prediction:
    """Immutable prediction record produced by ``get_prediction``."""

    predicted_price: float  # 2-decimal rounded regression projection
    signal: Signal
    trend: Trend
    confidence: int | float  # capped at 85, not floored; -inf when SMA5 is -0.0
    last_price: float  # most recent close, unrounded

    def to_dict(self) -> dict[str, Any]:
        """JSON shape consumed by the dashboard front end."""
        return {
            "predictedPrice": self.predicted_price,
            "signal": self.signal.value,
            "trend": self.trend.value,
            "confidence": self.confidence if math.isfinite(self.confidence) else None,
            "lastPrice": self.last_price,
        }
