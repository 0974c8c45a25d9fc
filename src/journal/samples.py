# src/journal/samples.py
"""Demonstration trades for a fresh journal."""
from datetime import datetime

from src.journal.models import Direction, TradeDraft, TradeRecord
from src.journal.repository import TradeRepository

SAMPLE_TRADES = [
    TradeDraft(
        instrument="EUR/USD",
        direction=Direction.LONG,
        entry_price=1.0850,
        stop_price=1.0820,
        take_profit_price=1.0920,
        quantity=1,
        entry_time=datetime(2024, 1, 15, 9, 30),
        exit_time=datetime(2024, 1, 15, 14, 45),
        exit_price=1.0900,
        notes="Strong bullish momentum, breakout trade",
    ),
    TradeDraft(
        instrument="GBP/USD",
        direction=Direction.SHORT,
        entry_price=1.2650,
        stop_price=1.2680,
        take_profit_price=1.2580,
        quantity=1,
        entry_time=datetime(2024, 1, 16, 10, 15),
        exit_time=datetime(2024, 1, 16, 16, 30),
        exit_price=1.2600,
        notes="Resistance level rejection",
    ),
    TradeDraft(
        instrument="USD/JPY",
        direction=Direction.LONG,
        entry_price=150.25,
        stop_price=149.95,
        take_profit_price=151.05,
        quantity=1,
        entry_time=datetime(2024, 1, 17, 8, 0),
        exit_time=datetime(2024, 1, 17, 12, 0),
        exit_price=149.80,
        notes="Trend continuation",
    ),
    TradeDraft(
        instrument="AUD/USD",
        direction=Direction.LONG,
        entry_price=0.6750,
        stop_price=0.6720,
        take_profit_price=0.6810,
        quantity=2,
        entry_time=datetime(2024, 1, 18, 11, 20),
        exit_time=datetime(2024, 1, 18, 15, 10),
        exit_price=0.6790,
        notes="Support bounce",
    ),
    TradeDraft(
        instrument="EUR/USD",
        direction=Direction.SHORT,
        entry_price=1.0880,
        stop_price=1.0910,
        take_profit_price=1.0830,
        quantity=1,
        entry_time=datetime(2024, 1, 19, 9, 45),
        exit_time=datetime(2024, 1, 19, 13, 20),
        exit_price=1.0845,
        notes="Failed breakout",
    ),
]


def seed_sample_trades(repository: TradeRepository) -> list[TradeRecord]:
    """Add the demonstration trades to a repository.

    Args:
        repository: Repository to populate.

    Returns:
        The stored records in the order they were added.
    """
    return [repository.create(draft) for draft in SAMPLE_TRADES]
