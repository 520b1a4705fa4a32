"""Prediction engine: SMA crossover signal and linear regression projection.

Pure, stateless functions over an ordered closing-price series, plus the
bounded realtime window used by the live chart.
"""

from stockcast.prediction.engine import derive_signal, get_prediction
from stockcast.prediction.indicators import calculate_sma, linear_regression
from stockcast.prediction.models import Prediction, PricePoint, Signal, Trend
from stockcast.prediction.window import RealtimeWindow

__all__ = [
    "Prediction",
    "PricePoint",
    "RealtimeWindow",
    "Signal",
    "Trend",
    "calculate_sma",
    "derive_signal",
    "get_prediction",
    "linear_regression",
]
