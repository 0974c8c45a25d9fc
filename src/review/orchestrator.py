# src/review/orchestrator.py
"""Review orchestrator - forwards trades to the AI reviewer and stores results."""
import asyncio
import logging

from src.journal.errors import ReviewInProgressError
from src.journal.models import TradeRecord
from src.journal.repository import TradeRepository
from src.review.trade_reviewer import TradeReviewer

logger = logging.getLogger(__name__)


class ReviewOrchestrator:
    """Requests AI reviews and attaches them to stored trades.

    The repository is only touched after the reviewer returns a review, so a
    failed or cancelled request leaves the trade unchanged.
    """

    def __init__(self, repository: TradeRepository, reviewer: TradeReviewer):
        """Initialize the orchestrator.

        Args:
            repository: Repository holding the trades to review.
            reviewer: Client for the external AI reviewer.
        """
        self._repository = repository
        self._reviewer = reviewer
        self._in_flight: set[str] = set()

    def is_reviewing(self, trade_id: str) -> bool:
        """Check whether a review request for the trade is outstanding."""
        return trade_id in self._in_flight

    async def review_trade(self, trade_id: str) -> TradeRecord | None:
        """Review a trade and attach the result to it.

        Args:
            trade_id: The trade to review.

        Returns:
            The updated trade, or None if no trade has that id.

        Raises:
            ExternalReviewError: If the reviewer fails. The trade is not modified.
            ReviewInProgressError: If the trade is already being reviewed.
        """
        trade = self._repository.get_by_id(trade_id)
        if trade is None:
            logger.warning(f"Cannot review unknown trade {trade_id}")
            return None

        if trade_id in self._in_flight:
            raise ReviewInProgressError(trade_id)

        self._in_flight.add(trade_id)
        try:
            # Run synchronous Claude API call in thread pool to avoid blocking event loop
            review = await asyncio.to_thread(self._reviewer.review, trade)
        finally:
            self._in_flight.discard(trade_id)

        updated = self._repository.update(trade_id, ai_review=review)
        logger.info(f"Attached AI review to trade {trade_id} (grade={review.grade or 'n/a'})")
        return updated

    def clear_review(self, trade_id: str) -> TradeRecord | None:
        """Detach the AI review from a trade."""
        return self._repository.update(trade_id, ai_review=None)
