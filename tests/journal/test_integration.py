# tests/journal/test_integration.py
"""Integration tests for the Journal module."""
from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

from src.journal import (
    AIReview,
    Direction,
    JournalStats,
    TradeDraft,
    TradeRepository,
)
from src.review import ReviewOrchestrator, TradeReviewer

TODAY = date(2024, 1, 16)


def make_draft(
    instrument: str,
    direction: Direction,
    entry_price: float,
    stop_price: float,
    take_profit_price: float,
    exit_price: float | None,
    day: int,
) -> TradeDraft:
    """Create a one-lot trade draft entered and exited on the given January day."""
    return TradeDraft(
        instrument=instrument,
        direction=direction,
        entry_price=entry_price,
        stop_price=stop_price,
        take_profit_price=take_profit_price,
        quantity=1,
        entry_time=datetime(2024, 1, day, 9, 30),
        exit_time=datetime(2024, 1, day, 15, 0),
        exit_price=exit_price,
    )


class TestJournalIntegration:
    """End-to-end flows through repository, statistics and reviews."""

    @pytest.fixture
    def repository(self) -> TradeRepository:
        return TradeRepository()

    @pytest.fixture
    def stats(self, repository) -> JournalStats:
        return JournalStats(repository, today=lambda: TODAY)

    def test_long_trade_scenario(self, repository, stats):
        record = repository.create(
            make_draft("EUR/USD", Direction.LONG, 1.0850, 1.0820, 1.0920, 1.0900, day=15)
        )

        assert record.pnl == pytest.approx((1.0900 - 1.0850) * 100)
        assert record.r_multiple == pytest.approx(1.67, abs=0.01)
        assert stats.win_rate() == 100.0

    def test_short_trade_scenario(self, repository, stats):
        record = repository.create(
            make_draft("GBP/USD", Direction.SHORT, 1.2650, 1.2680, 1.2580, 1.2600, day=16)
        )

        assert record.pnl > 0
        assert stats.today_pnl() == pytest.approx(record.pnl)

    def test_open_trade_scenario(self, repository, stats):
        repository.create(
            make_draft("EUR/USD", Direction.LONG, 1.0850, 1.0820, 1.0920, 1.0900, day=15)
        )
        repository.create(
            make_draft("USD/JPY", Direction.LONG, 150.25, 149.95, 151.05, 149.80, day=15)
        )
        win_rate = stats.win_rate()
        average_r = stats.average_r()

        record = repository.create(
            make_draft("AUD/USD", Direction.LONG, 0.6750, 0.6720, 0.6810, None, day=16)
        )

        assert record.pnl is None
        assert record.r_multiple is None
        assert stats.total_trades() == 3
        assert stats.win_rate() == win_rate == 50.0
        assert stats.average_r() == average_r
        assert stats.recent_trades(1) == [record]

    @pytest.mark.asyncio
    async def test_review_scenario(self, repository, stats):
        record = repository.create(
            make_draft("EUR/USD", Direction.LONG, 1.0850, 1.0820, 1.0920, 1.0900, day=15)
        )
        review = AIReview(
            grade="B",
            summary="Followed the plan",
            strengths=["Clear setup"],
            mistakes=["Early exit"],
            rule_violations=[],
            invalidation_triggers=["Close below 1.0820"],
            next_actions=["Scale out at target"],
            risk_flags=[],
        )
        reviewer = MagicMock(spec=TradeReviewer)
        reviewer.review.return_value = review
        orchestrator = ReviewOrchestrator(repository, reviewer)

        updated = await orchestrator.review_trade(record.id)

        assert updated.ai_review == review
        assert updated.pnl == record.pnl
        assert updated.r_multiple == record.r_multiple
        assert updated.instrument == record.instrument
        assert updated.entry_time == record.entry_time
        assert stats.average_r() == pytest.approx(record.r_multiple)
