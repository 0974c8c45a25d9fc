# src/journal/stats.py
"""Dashboard statistics derived from the trade repository."""
from datetime import date
from typing import Callable

from src.journal.models import DashboardStats, TradeRecord
from src.journal.repository import TradeRepository


class JournalStats:
    """Aggregates dashboard statistics over the repository's current trades.

    Nothing is cached; every query reads the repository again.
    """

    def __init__(
        self,
        repository: TradeRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the aggregator.

        Args:
            repository: Repository to read trades from.
            today: Returns the current local calendar date.
        """
        self._repository = repository
        self._today = today

    def recent_trades(self, n: int) -> list[TradeRecord]:
        """Get the n most recently entered trades.

        Args:
            n: Maximum number of trades to return. Must be positive.

        Returns:
            Trades ordered by entry time, newest first. Trades with equal
            entry times keep their insertion order.

        Raises:
            ValueError: If n is not a positive integer.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"n must be a positive integer, got {n!r}")

        trades = sorted(self._repository.list(), key=lambda t: t.entry_time, reverse=True)
        return trades[:n]

    def today_pnl(self) -> float:
        """Sum the PnL of trades that exited today.

        Only trades with a nonzero PnL are selected, so open and break-even
        trades are both left out. Break-even trades add nothing to the total
        either way.
        """
        today = self._today()
        return sum(
            (t.pnl for t in self._repository.list() if t.exit_time.date() == today and t.pnl),
            0.0,
        )

    def win_rate(self) -> float:
        """Percentage (0-100) of closed trades with a positive PnL."""
        closed = [t for t in self._repository.list() if t.pnl is not None]
        if not closed:
            return 0.0
        wins = sum(1 for t in closed if t.pnl > 0)
        return 100.0 * wins / len(closed)

    def total_trades(self) -> int:
        """Count all trades, open or closed."""
        return len(self._repository)

    def average_r(self) -> float:
        """Mean R-multiple over trades that have one."""
        r_values = [t.r_multiple for t in self._repository.list() if t.r_multiple is not None]
        if not r_values:
            return 0.0
        return sum(r_values) / len(r_values)

    def summary(self, recent_limit: int = 10) -> DashboardStats:
        """Collect every dashboard statistic in one object."""
        return DashboardStats(
            today_pnl=self.today_pnl(),
            win_rate=self.win_rate(),
            total_trades=self.total_trades(),
            average_r=self.average_r(),
            recent_trades=self.recent_trades(recent_limit),
        )
