"""Tests for get_prediction and its signal/confidence/trend derivation."""

import math
import random

import pytest

from stockcast.prediction.engine import (
    derive_signal,
    get_prediction,
    round_cents,
    round_half_up,
)
from stockcast.prediction.indicators import calculate_sma
from stockcast.prediction.models import Prediction, PricePoint, Signal, Trend
from tests.conftest import make_history


class TestMinimumLengthGate:
    """getPrediction returns None below 5 points."""

    def test_none_input(self) -> None:
        """No series, no prediction."""
        assert get_prediction(None) is None

    @pytest.mark.parametrize("length", [0, 1, 2, 3, 4])
    def test_short_series_returns_none(self, length: int) -> None:
        """Fewer than 5 points returns None."""
        assert get_prediction(make_history([100.0] * length)) is None

    @pytest.mark.parametrize("length", [5, 6, 19, 20, 21, 60])
    def test_long_enough_series_returns_prediction(self, length: int) -> None:
        """5 or more points always produce a Prediction."""
        assert isinstance(get_prediction(make_history([100.0] * length)), Prediction)


class TestScenarios:
    """End-to-end prediction scenarios."""

    def test_short_uptrend_is_neutral(self) -> None:
        """Five points: SMA(20) undefined, so NEUTRAL/50 despite the uptrend."""
        result = get_prediction(make_history([10.0, 11.0, 12.0, 13.0, 14.0]))
        assert result is not None
        assert result.predicted_price == 15.0
        assert result.last_price == 14.0
        assert result.trend == Trend.UP
        assert result.signal == Signal.NEUTRAL
        assert result.confidence == 50

    def test_constant_series_is_neutral_and_down(self) -> None:
        """Equal SMAs give NEUTRAL; projection == last price gives DOWN."""
        result = get_prediction(make_history([100.0] * 25))
        assert result is not None
        assert result.predicted_price == 100.0
        assert result.signal == Signal.NEUTRAL
        assert result.confidence == 50
        assert result.trend == Trend.DOWN

    def test_rising_series_is_buy(self, rising_history: list[PricePoint]) -> None:
        """100..124: SMA5 = 122 > SMA20 = 114.5, confidence capped at 85."""
        result = get_prediction(rising_history)
        assert result is not None
        assert result.signal == Signal.BUY
        assert result.confidence == 85
        assert result.trend == Trend.UP
        assert result.predicted_price == 125.0
        assert result.last_price == 124.0

    def test_falling_series_is_sell(self) -> None:
        """124..100: SMA5 = 102 < SMA20 = 109.5."""
        result = get_prediction(make_history([float(124 - i) for i in range(25)]))
        assert result is not None
        assert result.signal == Signal.SELL
        assert result.confidence == 85
        assert result.trend == Trend.DOWN
        assert result.predicted_price == 99.0

    def test_confidence_below_cap(self) -> None:
        """SMA5 = 100.2, SMA20 = 100.05 -> 60 + 1.4993 -> 61."""
        closes = [100.0] * 15 + [100.2] * 5
        result = get_prediction(make_history(closes))
        assert result is not None
        assert result.signal == Signal.BUY
        assert result.confidence == 61

    def test_accepts_bare_closes(self, rising_closes: list[float]) -> None:
        """Floats and PricePoints give the same result."""
        assert get_prediction(rising_closes) == get_prediction(make_history(rising_closes))

    def test_dates_are_ignored(self, rising_closes: list[float]) -> None:
        """Only closes feed the calculation."""
        relabelled = [PricePoint(date="x", close=c) for c in rising_closes]
        assert get_prediction(relabelled) == get_prediction(make_history(rising_closes))

    def test_last_price_unrounded(self) -> None:
        """lastPrice is the raw final close."""
        closes = [10.0, 10.5, 11.0, 11.5, 12.345678]
        result = get_prediction(closes)
        assert result is not None
        assert result.last_price == 12.345678

    def test_predicted_price_rounded_to_cents(self) -> None:
        """predictedPrice carries at most 2 decimals."""
        closes = [10.0, 10.3, 10.1, 10.7, 10.4, 10.9]
        result = get_prediction(closes)
        assert result is not None
        assert result.predicted_price == round(result.predicted_price, 2)


class TestSignalEdgeCases:
    """Null operands, zero SMA and the unclamped lower bound."""

    def test_missing_operand_is_neutral(self) -> None:
        """An undefined SMA gives NEUTRAL/50."""
        assert derive_signal(None, 100.0) == (Signal.NEUTRAL, 50.0)
        assert derive_signal(100.0, None) == (Signal.NEUTRAL, 50.0)
        assert derive_signal(None, None) == (Signal.NEUTRAL, 50.0)

    def test_equal_operands_are_neutral(self) -> None:
        """Equal SMAs give NEUTRAL/50."""
        assert derive_signal(100.0, 100.0) == (Signal.NEUTRAL, 50.0)

    def test_zero_long_sma_caps_confidence(self) -> None:
        """SMA20 == 0 with SMA5 > 0: infinite ratio, capped at 85, no exception."""
        closes = [-1.0] * 15 + [3.0] * 5
        assert calculate_sma(closes, 20)[-1] == 0.0
        result = get_prediction(closes)
        assert result is not None
        assert result.signal == Signal.BUY
        assert result.confidence == 85

    def test_confidence_has_no_lower_clamp(self) -> None:
        """Negative closes: SMA5 = -1 > SMA20 = -2.5 gives ratio 0.4 -> -540."""
        closes = [-3.0] * 15 + [-1.0] * 5
        result = get_prediction(closes)
        assert result is not None
        assert result.signal == Signal.BUY
        assert result.confidence == -540

    def test_negative_zero_short_sma_does_not_raise(self) -> None:
        """SMA5 underflows to -0.0: SELL with confidence -inf, serialized as null."""
        closes = [100.0] * 15 + [-5e-324, 0.0, 0.0, 0.0, 0.0]
        sma5 = calculate_sma(closes, 5)[-1]
        assert sma5 == 0.0
        assert math.copysign(1.0, sma5) == -1.0
        result = get_prediction(closes)
        assert result is not None
        assert result.signal == Signal.SELL
        assert result.confidence == -math.inf
        assert result.to_dict()["confidence"] is None


class TestProperties:
    """Signal partition, confidence bound and trend consistency over random walks."""

    @pytest.fixture
    def random_series(self) -> list[list[float]]:
        rng = random.Random(1234)
        series = []
        for _ in range(200):
            length = rng.randint(5, 60)
            price = 50 + rng.random() * 200
            closes = []
            for _ in range(length):
                price = max(1.0, price + (rng.random() - 0.5) * 6)
                closes.append(price)
            series.append(closes)
        return series

    def test_signal_partition(self, random_series: list[list[float]]) -> None:
        """BUY, SELL and NEUTRAL follow the strict SMA comparison."""
        for closes in random_series:
            result = get_prediction(closes)
            assert result is not None
            sma5 = calculate_sma(closes, 5)[-1]
            sma20 = calculate_sma(closes, 20)[-1]
            if sma5 is not None and sma20 is not None and sma5 > sma20:
                assert result.signal == Signal.BUY
            elif sma5 is not None and sma20 is not None and sma5 < sma20:
                assert result.signal == Signal.SELL
            else:
                assert result.signal == Signal.NEUTRAL

    def test_confidence_bound(self, random_series: list[list[float]]) -> None:
        """Positive prices keep confidence in [60, 85], NEUTRAL at 50."""
        for closes in random_series:
            result = get_prediction(closes)
            assert result is not None
            assert result.confidence <= 85
            if result.signal == Signal.NEUTRAL:
                assert result.confidence == 50
            else:
                assert result.confidence >= 60

    def test_trend_consistency(self, random_series: list[list[float]]) -> None:
        """UP exactly when the raw projection exceeds the last close."""
        from stockcast.prediction.indicators import linear_regression

        for closes in random_series:
            result = get_prediction(closes)
            assert result is not None
            expected = Trend.UP if linear_regression(closes) > closes[-1] else Trend.DOWN
            assert result.trend == expected


class TestRounding:
    """Half-up rounding helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(61.4993, 61), (61.5, 62), (2.5, 3), (-2.5, -2), (-540.0, -540), (85.0, 85)],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        """Ties go toward +infinity, as in Math.round."""
        assert round_half_up(value) == expected

    def test_round_half_up_passes_non_finite_through(self) -> None:
        """Infinite confidence comes back unchanged instead of raising."""
        assert round_half_up(-math.inf) == -math.inf
        assert round_half_up(math.inf) == math.inf

    def test_round_cents_half_up_on_exact_ties(self) -> None:
        """0.125 is exact in binary and rounds up (bankers' rounding would give 0.12)."""
        assert round_cents(0.125) == 0.13

    def test_round_cents_uses_binary_value(self) -> None:
        """2.675 is stored as 2.67499999..., so it rounds down."""
        assert round_cents(2.675) == 2.67

    def test_round_cents_passes_non_finite_through(self) -> None:
        """Infinity is returned unchanged."""
        assert round_cents(float("inf")) == float("inf")


class TestPredictionRecord:
    """Prediction value object."""

    def test_is_immutable(self, rising_history: list[PricePoint]) -> None:
        """Predictions are frozen."""
        result = get_prediction(rising_history)
        assert result is not None
        with pytest.raises(AttributeError):
            result.confidence = 10  # type: ignore[misc]

    def test_to_dict_shape(self, rising_history: list[PricePoint]) -> None:
        """to_dict uses the front end's camelCase keys."""
        result = get_prediction(rising_history)
        assert result is not None
        assert result.to_dict() == {
            "predictedPrice": 125.0,
            "signal": "BUY",
            "trend": "UP",
            "confidence": 85,
            "lastPrice": 124.0,
        }
