"""Configuration system using pydantic-settings with environment variable loading."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WATCHLIST = [
    "AAPL", "TSLA", "MSFT", "AMZN", "GOOGL", "NVDA", "META", "NFLX", "AMD", "COIN",
]

DEFAULT_TICKER_SYMBOLS = ["AAPL", "TSLA", "BTC", "MSFT", "NVDA", "AMZN", "META", "GOOGL"]


class FinnhubSettings(BaseSettings):
    """Finnhub quote/candle API connection settings."""

    model_config = SettingsConfigDict(env_prefix="FINNHUB_")

    # Demo sandbox key; may expire, replace via FINNHUB_API_KEY
    api_key: SecretStr = SecretStr("sandbox_c8j3iiaad3if863ead7g")
    base_url: str = "https://finnhub.io/api/v1"
    timeout_seconds: float = 10.0
    history_days: int = 30


class SimulationSettings(BaseSettings):
    """Realtime price simulation parameters.

    Drives the chart's live movement between quote refreshes. All fields
    configurable via SIMULATION_ environment variable prefix.
    """

    model_config = SettingsConfigDict(env_prefix="SIMULATION_")

    tick_interval: float = 2.0  # seconds between simulated ticks
    drift_pct: float = 0.2  # total drift range in percent (-0.1%..+0.1%)
    window_size: int = 50  # points kept on the realtime chart
    sma_period: int = 20  # overlay SMA period
    default_base_price: float = 150.0
    seed: int | None = None  # fixed seed for reproducible simulation


class StorageSettings(BaseSettings):
    """Watchlist and prediction history persistence."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    db_path: str = "data/stockcast.db"
    default_watchlist: list[str] = Field(default_factory=lambda: list(DEFAULT_WATCHLIST))


class DashboardSettings(BaseSettings):
    """Dashboard server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "0.0.0.0"
    port: int = 8080
    default_symbol: str = "AAPL"
    ticker_symbols: list[str] = Field(default_factory=lambda: list(DEFAULT_TICKER_SYMBOLS))


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: str = "console"
    finnhub: FinnhubSettings = FinnhubSettings()
    simulation: SimulationSettings = SimulationSettings()
    storage: StorageSettings = StorageSettings()
    dashboard: DashboardSettings = DashboardSettings()
