# src/journal/errors.py
"""Exceptions raised by the trading journal."""


class JournalError(Exception):
    """Base class for journal errors."""


class InvalidRecordError(JournalError, ValueError):
    """Raised when trade fields violate the record invariants.

    Attributes:
        errors: Mapping of field name to a human readable problem.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        details = "; ".join(f"{name}: {problem}" for name, problem in self.errors.items())
        super().__init__(f"Invalid trade record ({details})")


class ExternalReviewError(JournalError):
    """Raised when the AI reviewer fails to produce a usable review."""


class ReviewInProgressError(JournalError):
    """Raised when a review is requested for a trade already under review."""

    def __init__(self, trade_id: str):
        self.trade_id = trade_id
        super().__init__(f"Review already in progress for trade {trade_id}")
