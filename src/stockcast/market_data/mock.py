"""Synthetic daily history used when real candles are unavailable."""

from __future__ import annotations

import random
from datetime import date, timedelta

from stockcast.prediction.models import PricePoint

#: Max absolute daily move of the random walk is half of this.
DAILY_STEP = 5.0


def generate_mock_history(
    start_price: float | None = None,
    days: int = 30,
    rng: random.Random | None = None,
    today: date | None = None,
) -> list[PricePoint]:
    """Generate ``days + 1`` daily closes ending today as a random walk.

    Starts from ``150 + U(0,1) * 100`` unless ``start_price`` is given and
    steps by ``(U(0,1) - 0.5) * 5`` per day, including the first day.

    Args:
        start_price: Initial price before the first step.
        days: Number of days back from today.
        rng: Random source, for reproducible output in tests.
        today: Last date of the series. Defaults to the current date.

    Returns:
        Price points oldest first with ISO date labels.
    """
    rng = rng or random.Random()
    today = today or date.today()
    price = start_price if start_price is not None else 150 + rng.random() * 100

    history = []
    for i in range(days, -1, -1):
        price += (rng.random() - 0.5) * DAILY_STEP
        day = today - timedelta(days=i)
        history.append(PricePoint(date=day.isoformat(), close=price))
    return history
