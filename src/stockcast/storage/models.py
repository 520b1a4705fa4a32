"""Persisted record models."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class PredictionRecord:
    """A saved prediction, as listed in the history table.

    Stored in SQLite with prices as TEXT (``repr``) so floats round-trip exactly.
    """

    id: int
    saved_at: int  # Unix milliseconds
    symbol: str
    price_at_prediction: float
    predicted_price: float
    signal: str

    def to_dict(self) -> dict[str, Any]:
        saved = datetime.fromtimestamp(self.saved_at / 1000, tz=timezone.utc)
        return {
            "id": self.id,
            "date": saved.isoformat(timespec="seconds"),
            "symbol": self.symbol,
            "priceAtPrediction": self.price_at_prediction,
            "predictedPrice": self.predicted_price,
            "signal": self.signal,
        }
