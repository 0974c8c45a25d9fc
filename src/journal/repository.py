# src/journal/repository.py
"""In-memory repository owning the journal's trade records."""
import itertools
import logging
import math
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable

from src.journal.errors import InvalidRecordError, JournalError
from src.journal.metrics import CONTRACT_MULTIPLIER, compute_pnl, compute_r_multiple
from src.journal.models import AIReview, Direction, TradeDraft, TradeRecord

logger = logging.getLogger(__name__)


def _new_trade_id() -> str:
    return uuid.uuid4().hex


def sequential_ids(start: int = 1) -> Callable[[], str]:
    """Return an id factory producing "1", "2", ... from start."""
    counter = itertools.count(start)
    return lambda: str(next(counter))


class TradeRepository:
    """Canonical collection of trade records.

    Records are kept in insertion order and indexed by id. Stored records are
    immutable; ``update`` swaps in a modified copy.
    """

    POSITIVE_FIELDS = ("entry_price", "stop_price", "take_profit_price", "quantity")
    UPDATABLE_FIELDS = frozenset({"ai_review", "notes"})

    def __init__(
        self,
        contract_multiplier: float = CONTRACT_MULTIPLIER,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize an empty repository.

        Args:
            contract_multiplier: Multiplier used for derived PnL and R-multiple.
            id_factory: Callable producing new trade ids. Defaults to uuid4 hex.
        """
        self._multiplier = contract_multiplier
        self._id_factory = id_factory or _new_trade_id
        self._trades: list[TradeRecord] = []
        self._positions: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._trades)

    def create(self, draft: TradeDraft) -> TradeRecord:
        """Store a new trade and compute its metrics when it is closed.

        Args:
            draft: The trade fields supplied by the caller.

        Returns:
            The stored record including its id and any derived fields.

        Raises:
            InvalidRecordError: If any field violates the record invariants.
        """
        direction = self._validate(draft)

        trade_id = self._id_factory()
        if trade_id in self._positions:
            raise JournalError(f"Duplicate trade id generated: {trade_id}")

        pnl = None
        r_multiple = None
        if draft.exit_price is not None:
            pnl = compute_pnl(draft, self._multiplier)
            r_multiple = compute_r_multiple(draft, self._multiplier)

        record = TradeRecord(
            id=trade_id,
            instrument=draft.instrument.strip(),
            direction=direction,
            entry_price=draft.entry_price,
            stop_price=draft.stop_price,
            take_profit_price=draft.take_profit_price,
            quantity=draft.quantity,
            entry_time=draft.entry_time,
            exit_time=draft.exit_time,
            exit_price=draft.exit_price,
            notes=draft.notes,
            pnl=pnl,
            r_multiple=r_multiple,
        )

        self._positions[trade_id] = len(self._trades)
        self._trades.append(record)

        if record.is_open:
            logger.info(f"Recorded open trade {trade_id} ({record.instrument} {direction.value})")
        else:
            logger.info(
                f"Recorded closed trade {trade_id} ({record.instrument} {direction.value}): "
                f"pnl={pnl:.2f} r={r_multiple:.2f}"
            )
        return record

    def get_by_id(self, trade_id: str) -> TradeRecord | None:
        """Return the trade with the given id, or None if it does not exist."""
        position = self._positions.get(trade_id)
        if position is None:
            return None
        return self._trades[position]

    def list(self) -> list[TradeRecord]:
        """Return all trades in insertion order as a new list."""
        return list(self._trades)

    def update(self, trade_id: str, **changes) -> TradeRecord | None:
        """Change the review or notes of a stored trade.

        Price, size and timing fields are fixed once a trade is recorded, so
        ``pnl`` and ``r_multiple`` never need recomputing here.

        Args:
            trade_id: The trade to update.
            **changes: ``ai_review`` (an AIReview, or None to clear it) and/or
                ``notes``.

        Returns:
            The updated record, or None if no trade has that id.

        Raises:
            InvalidRecordError: If a change targets a fixed field or has the
                wrong type.
        """
        errors: dict[str, str] = {}
        for name, value in changes.items():
            if name not in self.UPDATABLE_FIELDS:
                errors[name] = "field cannot be changed after the trade is recorded"
            elif name == "ai_review" and value is not None and not isinstance(value, AIReview):
                errors[name] = "must be an AIReview or None"
            elif name == "notes" and not isinstance(value, str):
                errors[name] = "must be text"
        if errors:
            raise InvalidRecordError(errors)

        position = self._positions.get(trade_id)
        if position is None:
            logger.debug(f"Update skipped, trade {trade_id} not found")
            return None

        updated = replace(self._trades[position], **changes)
        self._trades[position] = updated
        logger.info(f"Updated trade {trade_id}: {', '.join(sorted(changes)) or 'no changes'}")
        return updated

    def _validate(self, draft: TradeDraft) -> Direction:
        """Check the draft against the record invariants.

        Returns:
            The draft's direction as a Direction member.
        """
        errors: dict[str, str] = {}

        if not isinstance(draft.instrument, str) or not draft.instrument.strip():
            errors["instrument"] = "Instrument is required"

        direction = None
        try:
            direction = Direction(draft.direction)
        except ValueError:
            errors["direction"] = "Direction must be Long or Short"

        for name in self.POSITIVE_FIELDS:
            if not _is_positive_number(getattr(draft, name)):
                errors[name] = "must be a finite positive number"

        if draft.exit_price is not None and not _is_positive_number(draft.exit_price):
            errors["exit_price"] = "must be a finite positive number when given"

        for name in ("entry_time", "exit_time"):
            value = getattr(draft, name)
            if not isinstance(value, datetime):
                errors[name] = "must be a timestamp"
            elif value.tzinfo is not None:
                errors[name] = "must be a naive local timestamp"

        if not isinstance(draft.notes, str):
            errors["notes"] = "must be text"

        if errors:
            logger.warning(f"Rejected trade draft: {errors}")
            raise InvalidRecordError(errors)

        return direction


def _is_positive_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0
