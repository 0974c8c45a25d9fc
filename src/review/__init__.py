# src/review/__init__.py
"""Review package for AI-generated trade reviews."""

from src.review.orchestrator import ReviewOrchestrator
from src.review.settings import ReviewerSettings
from src.review.trade_reviewer import TradeReviewer

__all__ = [
    "ReviewOrchestrator",
    "ReviewerSettings",
    "TradeReviewer",
]
