"""Shared test fixtures for the stock dashboard."""

import pytest

from stockcast.config import AppSettings, SimulationSettings, StorageSettings
from stockcast.prediction.models import PricePoint


def make_history(closes: list[float]) -> list[PricePoint]:
    """Wrap closes in price points with sequential day labels."""
    return [PricePoint(date=f"2024-01-{i + 1:02d}", close=c) for i, c in enumerate(closes)]


@pytest.fixture
def rising_closes() -> list[float]:
    """25 closes rising by 1 from 100 (100..124)."""
    return [float(100 + i) for i in range(25)]


@pytest.fixture
def rising_history(rising_closes: list[float]) -> list[PricePoint]:
    return make_history(rising_closes)


@pytest.fixture
def mock_settings(tmp_path) -> AppSettings:
    """Return AppSettings with a temp database and a seeded simulator."""
    return AppSettings(
        log_level="DEBUG",
        simulation=SimulationSettings(tick_interval=0.01, seed=42),
        storage=StorageSettings(db_path=str(tmp_path / "stockcast.db")),
    )
