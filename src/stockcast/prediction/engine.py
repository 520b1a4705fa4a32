"""Prediction engine: regression projection plus SMA(5)/SMA(20) crossover signal.

A stateless set of functions. ``get_prediction`` is the single entry point
the dashboard calls; it returns ``None`` (never raises) when the series is
too short to say anything.

Confidence is capped at 85 with no lower clamp:
    BUY:  min(85, 60 + (sma5 / sma20 - 1) * 1000)
    SELL: min(85, 60 + (sma20 / sma5 - 1) * 1000)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from stockcast.logging import get_logger
from stockcast.prediction.indicators import calculate_sma, linear_regression
from stockcast.prediction.models import Prediction, PricePoint, Signal, Trend

logger = get_logger(__name__)

MIN_POINTS = 5
SHORT_PERIOD = 5
LONG_PERIOD = 20
CONFIDENCE_BASE = 60
CONFIDENCE_CAP = 85
CONFIDENCE_SCALE = 1000
NEUTRAL_CONFIDENCE = 50

_CENTS = Decimal("0.01")


def _extract_closes(series: Sequence[PricePoint] | Sequence[float]) -> list[float]:
    """Return closes in input order from price points or bare floats."""
    return [p.close if isinstance(p, PricePoint) else float(p) for p in series]


def _ratio(numerator: float, denominator: float) -> float:
    """IEEE754 division: a zero denominator yields a signed infinity, not an error."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _crossover_confidence(fast: float, slow: float) -> float:
    return min(CONFIDENCE_CAP, CONFIDENCE_BASE + (_ratio(fast, slow) - 1) * CONFIDENCE_SCALE)


def round_half_up(value: float) -> int | float:
    """Round to the nearest integer, ties toward +infinity.

    Non-finite values (an SMA that underflowed to -0.0 divides to -inf)
    pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def round_cents(value: float) -> float:
    """Round to 2 decimals, half-up on the exact binary value of ``value``."""
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def derive_signal(last_sma5: float | None, last_sma20: float | None) -> tuple[Signal, float]:
    """Classify the crossover and compute the unrounded confidence.

    Either average being ``None`` (window longer than the series) or the two
    being equal falls through to NEUTRAL with confidence 50.

    Args:
        last_sma5: Final SMA(5) value, or None.
        last_sma20: Final SMA(20) value, or None.

    Returns:
        Tuple of (signal, confidence before rounding).
    """
    if last_sma5 is not None and last_sma20 is not None:
        if last_sma5 > last_sma20:
            return Signal.BUY, _crossover_confidence(last_sma5, last_sma20)
        if last_sma5 < last_sma20:
            return Signal.SELL, _crossover_confidence(last_sma20, last_sma5)
    return Signal.NEUTRAL, float(NEUTRAL_CONFIDENCE)


def get_prediction(
    series: Sequence[PricePoint] | Sequence[float] | None,
) -> Prediction | None:
    """Build a prediction from a chronologically ordered price series.

    Args:
        series: Price points (or bare closes), oldest first. Dates are ignored.

    Returns:
        A Prediction, or None when ``series`` is None or shorter than 5 points.
    """
    if not series or len(series) < MIN_POINTS:
        return None

    closes = _extract_closes(series)
    last_price = closes[-1]

    predicted_price = linear_regression(closes)
    last_sma20 = calculate_sma(closes, LONG_PERIOD)[-1]
    last_sma5 = calculate_sma(closes, SHORT_PERIOD)[-1]

    signal, confidence = derive_signal(last_sma5, last_sma20)
    trend = Trend.UP if predicted_price > last_price else Trend.DOWN

    prediction = Prediction(
        predicted_price=round_cents(predicted_price),
        signal=signal,
        trend=trend,
        confidence=round_half_up(confidence),
        last_price=last_price,
    )

    logger.debug(
        "prediction_computed",
        points=len(closes),
        sma5=last_sma5,
        sma20=last_sma20,
        signal=signal.value,
        trend=trend.value,
        confidence=prediction.confidence,
        predicted_price=prediction.predicted_price,
    )
    return prediction
