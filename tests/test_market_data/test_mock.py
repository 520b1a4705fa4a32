"""Tests for synthetic fallback history."""

import random
from datetime import date

from stockcast.market_data.mock import DAILY_STEP, generate_mock_history


class TestGenerateMockHistory:
    """Tests for generate_mock_history."""

    def test_length_is_days_plus_one(self) -> None:
        """One point per day including today."""
        assert len(generate_mock_history(days=30, rng=random.Random(1))) == 31
        assert len(generate_mock_history(days=0, rng=random.Random(1))) == 1

    def test_dates_end_today_in_order(self) -> None:
        """Dates run consecutively up to today."""
        today = date(2024, 3, 10)
        history = generate_mock_history(days=3, rng=random.Random(1), today=today)
        assert [p.date for p in history] == [
            "2024-03-07", "2024-03-08", "2024-03-09", "2024-03-10",
        ]

    def test_reproducible_with_seed(self) -> None:
        """Same seed, same walk."""
        today = date(2024, 1, 31)
        a = generate_mock_history(rng=random.Random(7), today=today)
        b = generate_mock_history(rng=random.Random(7), today=today)
        assert a == b

    def test_steps_are_bounded(self) -> None:
        """Each daily step stays within half the step range."""
        history = generate_mock_history(start_price=200.0, days=100, rng=random.Random(3))
        closes = [200.0] + [p.close for p in history]
        for prev, curr in zip(closes, closes[1:]):
            assert abs(curr - prev) <= DAILY_STEP / 2

    def test_default_start_price_range(self) -> None:
        """The start price is drawn from 150..250."""
        history = generate_mock_history(days=0, rng=random.Random(11))
        assert 150 - DAILY_STEP / 2 <= history[0].close <= 250 + DAILY_STEP / 2
