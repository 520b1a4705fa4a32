"""Bounded realtime price window with full SMA recomputation on every push."""

from __future__ import annotations

from collections.abc import Iterable

from stockcast.prediction.indicators import calculate_sma
from stockcast.prediction.models import PricePoint

DEFAULT_CAPACITY = 50
DEFAULT_SMA_PERIOD = 20


class RealtimeWindow:
    """FIFO window of the most recent closes shown on the live chart.

    New prices are appended and the oldest are dropped once ``capacity`` is
    exceeded. The SMA overlay is recomputed over the whole window after each
    push; no running sum is kept.

    Args:
        capacity: Maximum number of points retained.
        sma_period: SMA overlay period.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        sma_period: int = DEFAULT_SMA_PERIOD,
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        if sma_period <= 0:
            raise ValueError(f"sma_period must be positive, got {sma_period}")
        self._capacity = capacity
        self._sma_period = sma_period
        self._closes: list[float] = []
        self._labels: list[str] = []
        self._sma: list[float | None] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def sma_period(self) -> int:
        return self._sma_period

    @property
    def closes(self) -> list[float]:
        return list(self._closes)

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    @property
    def sma(self) -> list[float | None]:
        return list(self._sma)

    def __len__(self) -> int:
        return len(self._closes)

    def points(self) -> list[PricePoint]:
        """Current window as price points, oldest first."""
        return [PricePoint(date=d, close=c) for d, c in zip(self._labels, self._closes)]

    def seed(self, points: Iterable[PricePoint]) -> None:
        """Replace the window contents with an initial history.

        Only the newest ``capacity`` points are kept.
        """
        points = list(points)[-self._capacity:]
        self._labels = [p.date for p in points]
        self._closes = [p.close for p in points]
        self._sma = calculate_sma(self._closes, self._sma_period)

    def push(self, close: float, label: str) -> list[float | None]:
        """Append a price, evict the oldest beyond capacity, and recompute the SMA.

        Args:
            close: New price.
            label: Display label for the point (e.g. a HH:MM:SS time).

        Returns:
            The recomputed SMA series over the current window.
        """
        self._closes.append(close)
        self._labels.append(label)
        while len(self._closes) > self._capacity:
            self._closes.pop(0)
            self._labels.pop(0)

        self._sma = calculate_sma(self._closes, self._sma_period)
        return list(self._sma)
