# src/journal/models.py
"""Data models for the trading journal."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """Trade direction enumeration."""

    LONG = "Long"
    SHORT = "Short"


Grade = Literal["A", "B", "C", "D", "F"]


class AIReview(BaseModel):
    """Qualitative review of a single trade produced by the AI reviewer.

    Every field is optional so partial reviews can still be attached.
    """

    model_config = ConfigDict(frozen=True)

    grade: Grade | None = None
    summary: str | None = None
    strengths: list[str] = Field(default_factory=list)
    mistakes: list[str] = Field(default_factory=list)
    rule_violations: list[str] = Field(default_factory=list)
    invalidation_triggers: list[str] = Field(default_factory=list)
    next_actions: list[str] = Field(default_factory=list)
    risk_flags: list[str] = Field(default_factory=list)


@dataclass
class TradeDraft:
    """Raw trade fields supplied by the caller before the trade is stored."""

    instrument: str
    direction: Direction

    entry_price: float
    stop_price: float
    take_profit_price: float
    quantity: float

    entry_time: datetime
    exit_time: datetime

    exit_price: float | None = None
    notes: str = ""


@dataclass(frozen=True)
class TradeRecord:
    """A stored trade with its identity and derived metrics."""

    id: str
    instrument: str
    direction: Direction

    # Prices and size
    entry_price: float
    stop_price: float
    take_profit_price: float
    quantity: float

    # Timing
    entry_time: datetime
    exit_time: datetime

    exit_price: float | None = None
    notes: str = ""

    # Results, set only when the trade was created with an exit price
    pnl: float | None = None
    r_multiple: float | None = None

    ai_review: AIReview | None = None

    @property
    def is_open(self) -> bool:
        """Check if the trade is still open."""
        return self.exit_price is None

    @property
    def is_closed(self) -> bool:
        """Check if the trade has been closed."""
        return not self.is_open

    def to_dict(self) -> dict:
        """Convert the record to a JSON-friendly dictionary."""
        return {
            "id": self.id,
            "instrument": self.instrument,
            "direction": self.direction.value,
            "entry_price": self.entry_price,
            "stop_price": self.stop_price,
            "take_profit_price": self.take_profit_price,
            "quantity": self.quantity,
            "entry_time": self.entry_time.isoformat(),
            "exit_time": self.exit_time.isoformat(),
            "exit_price": self.exit_price,
            "notes": self.notes,
            "pnl": self.pnl,
            "r_multiple": self.r_multiple,
            "ai_review": self.ai_review.model_dump() if self.ai_review else None,
        }


@dataclass
class DashboardStats:
    """Dashboard statistics computed from the journal at one point in time."""

    today_pnl: float
    win_rate: float
    total_trades: int
    average_r: float
    recent_trades: list[TradeRecord] = field(default_factory=list)
