"""Price series indicators: simple moving average and linear regression projection.

Both are pure functions over an ordered sequence of closes (oldest first).
Summation order follows the original arithmetic exactly so that results are
bit-identical run to run and across callers.
"""

from collections.abc import Sequence


def linear_regression(series: Sequence[float]) -> float:
    """Project the least-squares line over ``(i, series[i])`` one step past the end.

    x is implicitly ``0..n-1``:
        slope = (n*Σxy - Σx*Σy) / (n*Σx² - (Σx)²)
        intercept = (Σy - slope*Σx) / n
        result = slope*n + intercept

    Degenerate input (n <= 1) yields NaN rather than raising. Callers are
    expected to gate on a minimum length before calling.

    Args:
        series: Ordered closes, oldest first.

    Returns:
        The projected value at x = n.
    """
    n = len(series)
    sum_x = 0.0
    sum_y = 0.0
    sum_xy = 0.0
    sum_xx = 0.0
    for i in range(n):
        y = series[i]
        sum_x += i
        sum_y += y
        sum_xy += i * y
        sum_xx += i * i

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return float("nan")

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return slope * n + intercept


def calculate_sma(closes: Sequence[float], period: int) -> list[float | None]:
    """Compute a simple moving average, recomputing each window from scratch.

    Output is parallel to ``closes``: ``None`` for indices before the first
    full window, otherwise the mean of the ``period`` closes ending at that
    index. The window is summed newest-to-oldest, never maintained as a
    running sum.

    Args:
        closes: Ordered closes, oldest first.
        period: Window length, must be positive.

    Returns:
        List of the same length as ``closes``. All ``None`` when
        ``period > len(closes)``.
    """
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")

    sma: list[float | None] = []
    for i in range(len(closes)):
        if i < period - 1:
            sma.append(None)
            continue
        total = 0.0
        for j in range(period):
            total += closes[i - j]
        sma.append(total / period)
    return sma
