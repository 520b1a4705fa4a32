"""Persistence layer for the watchlist and saved prediction history."""

from stockcast.storage.database import DashboardDatabase
from stockcast.storage.models import PredictionRecord
from stockcast.storage.store import DashboardStore

__all__ = ["DashboardDatabase", "DashboardStore", "PredictionRecord"]
