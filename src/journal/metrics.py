# src/journal/metrics.py
"""Per-trade performance metrics.

All functions accept any object exposing the trade price fields, so they work
on both ``TradeDraft`` and ``TradeRecord``.
"""
from src.journal.models import Direction, TradeDraft, TradeRecord

# Fixed notional per unit; not instrument aware.
CONTRACT_MULTIPLIER = 100.0


def compute_pnl(
    trade: TradeDraft | TradeRecord,
    multiplier: float = CONTRACT_MULTIPLIER,
) -> float:
    """Calculate realized profit or loss for a trade.

    Args:
        trade: Trade with entry/exit prices, direction and quantity.
        multiplier: Contract multiplier converting price delta to currency.

    Returns:
        Signed PnL, or 0.0 when the trade has no exit price.
    """
    if trade.exit_price is None:
        return 0.0

    price_delta = trade.exit_price - trade.entry_price
    sign = 1 if trade.direction == Direction.LONG else -1
    return price_delta * sign * trade.quantity * multiplier


def compute_r_multiple(
    trade: TradeDraft | TradeRecord,
    multiplier: float = CONTRACT_MULTIPLIER,
) -> float:
    """Calculate PnL as a multiple of the initial risk.

    Args:
        trade: Trade with entry/stop/exit prices, direction and quantity.
        multiplier: Contract multiplier converting price delta to currency.

    Returns:
        Signed R-multiple. 0.0 when the trade has no exit price or when the
        stop sits exactly at the entry price.
    """
    if trade.exit_price is None:
        return 0.0

    risk = abs(trade.entry_price - trade.stop_price) * trade.quantity * multiplier
    if risk == 0:
        return 0.0

    return compute_pnl(trade, multiplier) / risk


def planned_reward_to_risk(trade: TradeDraft | TradeRecord) -> float:
    """Ratio of the planned target distance to the stop distance."""
    risk_distance = abs(trade.entry_price - trade.stop_price)
    if risk_distance == 0:
        return 0.0
    return abs(trade.take_profit_price - trade.entry_price) / risk_distance
