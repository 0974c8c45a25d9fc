"""Tests for journal data models."""
from datetime import datetime

import pytest
from pydantic import ValidationError

from src.journal.models import AIReview, Direction, TradeRecord


def make_record(**overrides) -> TradeRecord:
    """Create a trade record for testing."""
    fields = dict(
        id="trade-1",
        instrument="EUR/USD",
        direction=Direction.LONG,
        entry_price=1.0850,
        stop_price=1.0820,
        take_profit_price=1.0920,
        quantity=1,
        entry_time=datetime(2024, 1, 15, 9, 30),
        exit_time=datetime(2024, 1, 15, 14, 45),
        exit_price=1.0900,
        notes="Breakout",
        pnl=0.5,
        r_multiple=1.67,
    )
    fields.update(overrides)
    return TradeRecord(**fields)


class TestDirection:
    """Tests for Direction enum."""

    def test_values(self):
        assert Direction.LONG.value == "Long"
        assert Direction.SHORT.value == "Short"
        assert len(Direction) == 2

    def test_from_string(self):
        assert Direction("Long") is Direction.LONG
        assert Direction("Short") is Direction.SHORT

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            Direction("long")


class TestAIReview:
    """Tests for AIReview."""

    def test_all_fields_optional(self):
        review = AIReview()

        assert review.grade is None
        assert review.summary is None
        assert review.strengths == []
        assert review.mistakes == []
        assert review.rule_violations == []
        assert review.invalidation_triggers == []
        assert review.next_actions == []
        assert review.risk_flags == []

    def test_from_json_payload(self):
        review = AIReview.model_validate(
            {
                "grade": "A",
                "summary": "Textbook execution",
                "strengths": ["Patient entry"],
                "risk_flags": ["Position size above plan"],
            }
        )

        assert review.grade == "A"
        assert review.strengths == ["Patient entry"]
        assert review.risk_flags == ["Position size above plan"]

    def test_invalid_grade_rejected(self):
        with pytest.raises(ValidationError):
            AIReview(grade="E")

    def test_frozen(self):
        review = AIReview(grade="C")

        with pytest.raises(ValidationError):
            review.grade = "A"


class TestTradeRecord:
    """Tests for TradeRecord."""

    def test_closed_trade(self):
        record = make_record()

        assert record.is_closed is True
        assert record.is_open is False

    def test_open_trade(self):
        record = make_record(exit_price=None, pnl=None, r_multiple=None)

        assert record.is_open is True
        assert record.is_closed is False

    def test_to_dict(self):
        record = make_record(ai_review=AIReview(grade="B"))

        data = record.to_dict()

        assert data["id"] == "trade-1"
        assert data["direction"] == "Long"
        assert data["entry_time"] == "2024-01-15T09:30:00"
        assert data["exit_time"] == "2024-01-15T14:45:00"
        assert data["pnl"] == 0.5
        assert data["ai_review"]["grade"] == "B"

    def test_to_dict_without_review(self):
        assert make_record().to_dict()["ai_review"] is None
