# src/journal/settings.py
"""Settings for the journal module."""
from pydantic import BaseModel, Field


class JournalSettings(BaseModel):
    """Configuration settings for the trading journal.

    Attributes:
        contract_multiplier: Scaling from price delta to currency PnL.
        recent_trades_limit: Number of trades shown in the recent list.
        seed_sample_data: Load the demonstration trades on startup.
    """

    contract_multiplier: float = Field(default=100.0, gt=0)
    recent_trades_limit: int = Field(default=10, ge=1, le=100)
    seed_sample_data: bool = True
