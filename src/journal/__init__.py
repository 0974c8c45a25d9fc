# src/journal/__init__.py
"""Journal module for trade records and dashboard statistics."""

from .errors import ExternalReviewError, InvalidRecordError, JournalError, ReviewInProgressError
from .metrics import CONTRACT_MULTIPLIER, compute_pnl, compute_r_multiple
from .models import AIReview, DashboardStats, Direction, TradeDraft, TradeRecord
from .repository import TradeRepository
from .samples import seed_sample_trades
from .settings import JournalSettings
from .stats import JournalStats

__all__ = [
    "AIReview",
    "CONTRACT_MULTIPLIER",
    "DashboardStats",
    "Direction",
    "ExternalReviewError",
    "InvalidRecordError",
    "JournalError",
    "JournalSettings",
    "JournalStats",
    "ReviewInProgressError",
    "TradeDraft",
    "TradeRecord",
    "TradeRepository",
    "compute_pnl",
    "compute_r_multiple",
    "seed_sample_trades",
]
