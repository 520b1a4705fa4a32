"""Realtime price drift simulation feeding the live chart window.

Between quote refreshes the dashboard animates the price with a small
random drift (default -0.1%..+0.1% per tick) and pushes each point into a
bounded RealtimeWindow whose SMA overlay is fully recomputed.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from datetime import datetime

from stockcast.config import SimulationSettings
from stockcast.logging import get_logger
from stockcast.market_data.models import PriceTick
from stockcast.prediction.engine import round_cents
from stockcast.prediction.models import PricePoint
from stockcast.prediction.window import RealtimeWindow

logger = get_logger(__name__)

#: Max random ticker move in percent.
TICKER_MAX_PCT = 2.0


class PriceSimulator:
    """Single-symbol random-walk price feed.

    Args:
        settings: Drift range, window size and SMA period.
        rng: Random source. Defaults to one seeded from ``settings.seed``.
    """

    def __init__(
        self,
        settings: SimulationSettings,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings
        self._rng = rng or random.Random(settings.seed)
        self.symbol: str | None = None
        self.base_price = settings.default_base_price
        self.window = RealtimeWindow(
            capacity=settings.window_size,
            sma_period=settings.sma_period,
        )

    def reset(
        self,
        symbol: str,
        base_price: float,
        history: Sequence[PricePoint] = (),
    ) -> None:
        """Switch the feed to a new symbol, seeding the window from its history."""
        self.symbol = symbol
        self.base_price = base_price
        self.window.seed(history)
        logger.info(
            "simulator_reset",
            symbol=symbol,
            base_price=base_price,
            points=len(self.window),
        )

    def next_price(self) -> float:
        """Apply one random drift step to the base price and return it."""
        drift = (self._rng.random() - 0.5) * self._settings.drift_pct
        self.base_price += self.base_price * (drift / 100)
        return self.base_price

    def tick(self, now: datetime | None = None) -> PriceTick:
        """Advance the price one step and push it into the realtime window."""
        now = now or datetime.now()
        price = self.next_price()
        label = now.strftime("%H:%M:%S")
        sma = self.window.push(price, label)
        return PriceTick(
            symbol=self.symbol or "",
            price=price,
            label=label,
            labels=self.window.labels,
            closes=self.window.closes,
            sma20=sma,
        )


def ticker_snapshot(
    symbols: Sequence[str],
    rng: random.Random | None = None,
) -> list[dict[str, object]]:
    """Random positive percent changes for the scrolling ticker strip."""
    rng = rng or random.Random()
    return [
        {"symbol": symbol, "changePct": round_cents(rng.random() * TICKER_MAX_PCT)}
        for symbol in symbols
    ]
